"""Data types for packagecloud API contracts."""

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

PackageType = Literal["deb", "dsc", "rpm"]


class Credentials(BaseModel):
    """Base URL and API token used for every request."""

    url: str
    token: str = Field(repr=False)

    model_config = {"frozen": True}


class Package(BaseModel):
    """Package fragment as returned by the list endpoint."""

    name: str
    filename: str
    created_at: datetime
    epoch: int = 0
    scope: str | None = None
    private: bool = False
    uploader_name: str = ""
    indexed: bool = False
    repository_html_url: str = ""
    downloads_detail_url: str = ""
    downloads_series_url: str = ""
    downloads_count_url: str = ""
    promote_url: str = ""
    destroy_url: str = ""
    distro_version: str = ""
    version: str = ""
    release: str | None = None
    type: str = ""
    package_url: str = ""
    package_html_url: str = ""

    model_config = {"frozen": True, "extra": "ignore"}

    @model_validator(mode="before")
    @classmethod
    def _null_as_default(cls, data: Any) -> Any:
        # the API sends null for unset fields; treat it as absent
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data

    @property
    def days_old(self) -> int:
        """Whole days elapsed since the package was uploaded."""
        created = self.created_at
        if created.tzinfo is None:
            created = created.replace(tzinfo=timezone.utc)
        return (datetime.now(timezone.utc) - created).days


class Pagination(BaseModel):
    """Pagination headers of a list response."""

    total: int
    per_page: int
    max_per_page: int


class PaginatedPackages(BaseModel):
    """One page of packages plus the cursor for the next page."""

    packages: list[Package] = Field(default_factory=list)
    pagination: Pagination
    next_url: str | None = None

    model_config = {"frozen": True}

    @property
    def is_last(self) -> bool:
        """True if there is no page after this one."""
        return self.next_url is None


class DistributionVersion(BaseModel):
    """A single released version of a distribution."""

    id: int
    display_name: str
    index_name: str


class Distribution(BaseModel):
    """A distribution and its known versions."""

    display_name: str
    index_name: str
    versions: list[DistributionVersion] = Field(default_factory=list)


class LinearizedDistribution(BaseModel):
    """Flat row describing one distribution version."""

    id: int
    type: PackageType
    distribution_name: str
    distribution_index: str
    version_name: str
    version_index: str

    @property
    def name(self) -> str:
        return f"{self.distribution_index}/{self.version_index}"


class Distributions(BaseModel):
    """Catalog of supported distributions grouped by package type."""

    deb: list[Distribution] = Field(default_factory=list)
    dsc: list[Distribution] = Field(default_factory=list)
    rpm: list[Distribution] = Field(default_factory=list)

    def linearize(self) -> list[LinearizedDistribution]:
        """Flatten the catalog into one row per distribution version.

        Rows are ordered deb, dsc, rpm and keep the server's ordering within
        each group.
        """
        rows: list[LinearizedDistribution] = []
        for package_type in ("deb", "dsc", "rpm"):
            for dist in getattr(self, package_type):
                for v in dist.versions:
                    rows.append(
                        LinearizedDistribution(
                            id=v.id,
                            type=package_type,
                            distribution_name=dist.display_name,
                            distribution_index=dist.index_name,
                            version_name=v.display_name,
                            version_index=v.index_name,
                        )
                    )
        return rows

    def version_ids(self, package_type: PackageType = "deb") -> dict[str, int]:
        """Map "distro/version" index names to distro version IDs.

        Args:
            package_type: Which part of the catalog to flatten.

        Returns:
            Mapping such as {"ubuntu/xenial": 165}. If a name appears more
            than once the first ID wins.
        """
        ids: dict[str, int] = {}
        for row in self.linearize():
            if row.type == package_type:
                ids.setdefault(row.name, row.id)
        return ids


class DestroyAction(BaseModel):
    """Pending removal of a listed package."""

    kind: Literal["destroy"] = "destroy"
    package: Package

    model_config = {"frozen": True}


class PromoteAction(BaseModel):
    """Pending promotion of a listed package to another repository."""

    kind: Literal["promote"] = "promote"
    package: Package
    destination: str

    model_config = {"frozen": True}


PackageAction = DestroyAction | PromoteAction
