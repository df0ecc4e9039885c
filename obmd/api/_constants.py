"""Constants shared by the rendering pipeline."""

DEFAULT_BASE_PATH = "/attachments"

# Embeds with these extensions become images, anything else a file link
IMAGE_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp", ".bmp", ".avif"}

# Marker classes consumed by site stylesheets
EMBED_IMAGE_CLASS = "obsidian-embed"
EMBED_FILE_CLASS = "obsidian-embed-file"
TAG_CLASS = "obsidian-tag"

UNRESOLVED_HREF_EMPTY = "empty"
UNRESOLVED_HREF_BASE_PATH = "base_path"
