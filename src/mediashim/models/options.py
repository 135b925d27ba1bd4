"""Per-session extraction options."""

from pydantic import BaseModel, ConfigDict


class ExtractionOptions(BaseModel):
    """Flags read by the extraction engine during a scan.

    - raw: no variant substitution, keep every field including empty ones
    - drop_frame: add DurationDropFrame to video streams
    - all_fields: keep every field, normalization still applies
    """

    model_config = ConfigDict(frozen=True)

    raw: bool = False
    drop_frame: bool = False
    all_fields: bool = False

    @property
    def skip_filter(self) -> bool:
        """Whether empty and bookkeeping fields are dropped."""
        return not (self.raw or self.all_fields)
