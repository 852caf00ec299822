"""
Centralized constants for partner pages.

Change query parameter names or redirect targets here instead of scattering literals across routes.
"""

# Date keys of the schedule (yyyy-MM-dd)
SCHEDULE_DATE_FORMAT = "%Y-%m-%d"

# Where a partner page sends visitors before its scheduled date (home page drops section)
COMING_SOON_REDIRECT = "/#drops"

# Query parameters on GET /partners/{slug}
SPOOF_DATE_PARAM = "spoofDate"
DROP_ADDRESS_PARAM = "drop"

# Public partner page path on the site, used for share links
PARTNER_PAGE_PATH = "/partner"

# Mirror posts on Arweave are tagged with these
MIRROR_APP_NAME = "MirrorXYZ"
MIRROR_DIGEST_TAG = "Original-Content-Digest"
