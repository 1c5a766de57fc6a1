"""
Shared color tokens for score bands, biomarker statuses and trends.
"""

SUCCESS = "#30D158"        # green
SUCCESS_LIGHT = "#32D74B"  # light green
WARNING = "#FF9F0A"        # orange
ALERT = "#FF6B35"          # red-orange
DANGER = "#FF3B30"         # red
NEUTRAL = "#8E8E93"        # gray
