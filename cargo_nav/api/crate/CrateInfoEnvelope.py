"""Top-level registry response wrapping a crate record."""

from pydantic import BaseModel, ConfigDict

from .CrateInfo import CrateInfo


class CrateInfoEnvelope(BaseModel):
    """``{"crate": {...}}`` as returned by ``GET /api/v1/crates/<name>``.

    The response also carries versions, keywords and categories, which are
    not needed to resolve a link and are ignored.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    crate: CrateInfo
