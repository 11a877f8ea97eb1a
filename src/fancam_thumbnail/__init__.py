"""
Fancam Thumbnail Engine - crop a photo to 16:9 and overlay text.

Modules:
  anchors   - The nine text anchor positions
  crop      - 16:9 crop rectangles, initial crop, drag/resize, source mapping
  layout    - Text anchor coordinates and font sizes for a surface
  fonts     - Font family registry and loading with fallback
  state     - ThumbnailState and image decoding
  renderer  - Projects a state onto a surface (image, text, drop shadow)
  preview   - Live container-width preview driver
  export    - Fixed 1280x720 PNG export driver
  session   - Editor session that notifies listeners on every edit
  config    - Paths and defaults (data/thumbnail_config.json, .env)
"""
