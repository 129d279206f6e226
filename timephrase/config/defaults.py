"""Default configuration values."""

from typing import Dict, Any

# Default settings as a dictionary (useful for initialization)
DEFAULT_SETTINGS: Dict[str, Any] = {
    "cutoff": {
        "slots": [
            {"name": "morning", "start": "00:00", "label": "11:30"},
            {"name": "midday", "start": "11:30", "label": "18:00"},
            {"name": "afternoon", "start": "18:00", "label": "20:00"},
            {"name": "evening", "start": "20:00", "label": None},
        ],
    },
    "logging": {
        "debug": False,
        "log_dir": None,
    },
}
