"""Components, rectangle collision detection, game state switching and JSON access for 2D games."""

__version__ = "0.1.0"
__all__ = ["enums", "components", "json_document", "game_state", "collision"]