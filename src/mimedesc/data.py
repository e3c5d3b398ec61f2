# Seed table curated by hand; NOT generator output.
# Holds a subset of common shared-mime-info types only.
# Run python -m mimedesc.generate to replace it with the full upstream table.
"""MIME type descriptions from the freedesktop.org shared-mime-info database."""

from types import MappingProxyType
from typing import Mapping

# MIME_DATA maps MIME types to their human-friendly descriptions.
MIME_DATA: Mapping[str, str] = MappingProxyType(
    {
        "application/epub+zip": "electronic book document",
        "application/gzip": "Gzip archive",
        "application/javascript": "JavaScript program",
        "application/json": "JSON document",
        "application/msword": "Word document",
        "application/octet-stream": "unknown",
        "application/pdf": "PDF document",
        "application/rtf": "RTF document",
        "application/sql": "SQL code",
        "application/vnd.ms-excel": "Excel spreadsheet",
        "application/vnd.oasis.opendocument.text": "ODT document",
        "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet": "Excel 2007 spreadsheet",
        "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "Word 2007 document",
        "application/vnd.rar": "RAR archive",
        "application/x-7z-compressed": "7-zip archive",
        "application/x-executable": "executable",
        "application/x-iso9660-image": "raw CD image",
        "application/x-sharedlib": "shared library",
        "application/x-shellscript": "shell script",
        "application/x-tar": "Tar archive",
        "application/xml": "XML document",
        "application/zip": "Zip archive",
        "audio/flac": "FLAC audio",
        "audio/mpeg": "MP3 audio",
        "audio/x-wav": "WAV audio",
        "font/ttf": "TrueType font",
        "image/bmp": "Windows BMP image",
        "image/gif": "GIF image",
        "image/jpeg": "JPEG image",
        "image/png": "PNG image",
        "image/svg+xml": "SVG image",
        "image/tiff": "TIFF image",
        "image/webp": "WebP image",
        "inode/directory": "folder",
        "text/calendar": "VCS/ICS calendar",
        "text/css": "CSS stylesheet",
        "text/csv": "CSV document",
        "text/html": "HTML document",
        "text/markdown": "Markdown document",
        "text/plain": "plain text document",
        "text/vcard": "electronic business card",
        "text/x-csrc": "C source code",
        "text/x-go": "Go source code",
        "text/x-python": "Python script",
        "text/x-python3": "Python 3 script",
        "video/mp4": "MPEG-4 video",
        "video/webm": "WebM video",
        "video/x-matroska": "Matroska video",
    }
)
