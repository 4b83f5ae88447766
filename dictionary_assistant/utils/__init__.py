# dictionary_assistant/utils/__init__.py
# small helpers shared by the cli and tui: logging, config, metrics, timing
