"""webshare: share a directory over HTTP for browsing, download and upload."""
