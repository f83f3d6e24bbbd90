"""Runtime package.

Keep this module dependency-light: importing `voice_relay.runtime.*` from unit
tests should not open a connection to the Gemini API.
"""

__all__: list[str] = []
