import os


# Keep the resize/index-error alerts off during tests unless a test enables
# them explicitly through ``observability.THRESHOLDS``.
os.environ.setdefault("ORDERED_LIST_RESIZE_ALERT_THRESHOLD", "0")
os.environ.setdefault("ORDERED_LIST_INDEX_ERROR_ALERT_THRESHOLD", "0")
