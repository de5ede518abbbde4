from .validation import is_simple_path, jsonify

__all__ = ["is_simple_path", "jsonify"]
