from teams_tools.extract.images import IMG_SRC_PATTERN, extract_image_urls

__all__ = ["IMG_SRC_PATTERN", "extract_image_urls"]
