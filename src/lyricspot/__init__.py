"""lyricspot — synced lyrics lookup and playback tracking for music videos."""

__version__ = "0.1.0"
