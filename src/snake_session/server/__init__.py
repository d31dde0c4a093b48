"""ASGI server exposing snake sessions over WebSocket."""
