"""StoryLab script tools - retime and export generated video scripts.

WHY: The StoryLab front end generates markdown video scripts with inline
(MM:SS) markers. Users edit those scripts and then download them as text or
subtitles. This package wraps the script_timing engine with the pieces a
front end needs: configuration, export formatters, a CLI, and an HTTP API.

HOW: Three layers - engine (script_timing, pure functions), export
(pluggable formatters + file saving), surfaces (CLI, FastAPI server).

RULES:
- The engine is the only place timing logic lives
- Adding an export format = one new formatter module, no engine changes
"""

__version__ = "0.1.0"
