"""CBCT preset selector: pick a CBCT preset by machine and pathology."""

__version__ = "0.1.0"

APP_NAME = "cbct_preset_selector"
