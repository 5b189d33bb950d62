"""Server-rendered pages and the client-side state of the video page."""
