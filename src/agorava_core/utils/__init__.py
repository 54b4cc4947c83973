"""
agorava_core.utils

Pure helper functions with no framework dependencies.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Helpers here must stay side-effect free; they are called from hot request paths.
