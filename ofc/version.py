"""
Version information for the OFC engine.
"""

VERSION = "0.3.0"
BUILD_DATE = "2026-10-19"


def get_version_info():
    """Get formatted version information"""
    return {
        'version': VERSION,
        'build_date': BUILD_DATE,
    }
