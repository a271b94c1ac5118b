from decksearch.clients.tofulearn import (
    END_OF_DATA_MAX_BYTES,
    ENVELOPE_PREFIX_BYTES,
    EndOfData,
    PageFetched,
    PageOutcome,
    fetch_page,
)

__all__ = [
    "END_OF_DATA_MAX_BYTES",
    "ENVELOPE_PREFIX_BYTES",
    "EndOfData",
    "PageFetched",
    "PageOutcome",
    "fetch_page",
]
