"""HTTP API for the StoryLab script tools (FastAPI)."""
