import os

# keep test output free of telemetry console lines
os.environ.setdefault("SNAPEDIT_DISABLE_CONSOLE", "1")
os.environ.setdefault("SNAPEDIT_LOG_LEVEL", "ERROR")
