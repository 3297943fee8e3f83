# 📄 File: app/modules/marketplace/domain/models/medicine.py
# 🧭 Purpose (Layman Explanation):
# Defines what a medicine listing is in our marketplace - the product, what diseases and plants
# it treats, how it is packaged, who sells it, and how popular it is.
# 🧪 Purpose (Technical Summary):
# Domain model for MedicineListing with nested value objects (package size, images, seller),
# field-level invariants, MongoDB document mapping and derived presentation values.
# 🔗 Dependencies:
# pydantic (v2), email-validator (EmailStr), datetime, vocabulary enums
# 🔄 Connected Modules / Calls From:
# medicine_repository.py, medicine_repository_impl.py, command/query handlers, medicine_schemas.py

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from pydantic.alias_generators import to_camel

from .vocabulary import (
    ApplicationMethod,
    Availability,
    BusinessType,
    Certification,
    Condition,
    Currency,
    MedicineType,
    PackageUnit,
    TargetDisease,
    TargetPlant,
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MarketplaceModel(BaseModel):
    """
    Base model for marketplace documents.

    Attributes are snake_case in Python and camelCase on the wire and in
    MongoDB, enum members are stored as their plain string values, and
    surrounding whitespace is trimmed from every string.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        str_strip_whitespace=True,
    )


# =============================================================================
# VALUE OBJECTS
# =============================================================================

class Coordinates(MarketplaceModel):
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)


class SellerLocation(MarketplaceModel):
    city: Optional[str] = None
    country: Optional[str] = None
    coordinates: Optional[Coordinates] = None


class Seller(MarketplaceModel):
    """Contact and business details of whoever sells the listing"""

    name: str = Field(..., min_length=1, description="Seller name")
    email: EmailStr = Field(..., description="Seller contact email")
    phone: Optional[str] = None
    location: Optional[SellerLocation] = None
    business_type: BusinessType = BusinessType.AGRICULTURAL_STORE
    certifications: List[Certification] = Field(default_factory=list)

    @field_validator("email")
    @classmethod
    def lowercase_email(cls, v: str) -> str:
        return v.lower()


class PackageSize(MarketplaceModel):
    value: float = Field(..., ge=0, description="Package size value")
    unit: PackageUnit

    def formatted(self) -> str:
        value = int(self.value) if float(self.value).is_integer() else self.value
        return f"{value} {self.unit}"


class MedicineImage(MarketplaceModel):
    url: str = Field(..., min_length=1)
    alt: str = ""

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        """Image URLs must be absolute http(s) links"""
        parsed = urlparse(v)
        if parsed.scheme not in ("http", "https") or not parsed.netloc:
            raise ValueError("Image url must be a valid http(s) URL")
        return v


# =============================================================================
# MEDICINE LISTING
# =============================================================================

def _normalize_tags(tags: List[str]) -> List[str]:
    return [tag.strip().lower() for tag in tags if tag and tag.strip()]


def _summarize(values: List[str], shown: int = 3) -> str:
    if len(values) <= shown:
        return ", ".join(values)
    return f"{', '.join(values[:shown])} and {len(values) - shown} more"


class MedicineDetails(MarketplaceModel):
    """
    Seller-supplied part of a medicine listing.

    Everything a client may send when creating a listing. System-managed
    fields (id, views, timestamps) live on MedicineListing.
    """

    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1, max_length=1000)
    price: float = Field(..., ge=0)
    currency: Currency = Currency.USD
    medicine_type: MedicineType
    target_diseases: List[TargetDisease] = Field(..., min_length=1)
    target_plants: List[TargetPlant] = Field(..., min_length=1)
    active_ingredient: str = Field(..., min_length=1, max_length=200)
    concentration: str = Field(..., min_length=1, max_length=50)
    application_method: ApplicationMethod
    package_size: PackageSize
    condition: Condition
    images: List[MedicineImage] = Field(..., min_length=1)
    seller: Seller
    availability: Availability = Availability.AVAILABLE
    quantity: int = Field(default=1, ge=0)
    tags: List[str] = Field(default_factory=list)
    specifications: Dict[str, str] = Field(default_factory=dict)
    featured: bool = False
    negotiable: bool = True

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: List[str]) -> List[str]:
        return _normalize_tags(v)


class MedicineListing(MedicineDetails):
    """
    A plant-disease medicine offered on the marketplace.

    Invariants:
    - targetDiseases, targetPlants and images are never empty
    - price, quantity and packageSize.value are never negative
    - enumerated fields only hold vocabulary values
    - views only ever grows (incremented atomically by the repository)
    """

    id: Optional[str] = None
    views: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    # Business Logic Methods

    @classmethod
    def create_new(cls, details: MedicineDetails) -> "MedicineListing":
        """
        Build a fresh listing from validated seller input.

        Args:
            details: Validated seller-supplied fields

        Returns:
            New MedicineListing with zero views and current timestamps
        """
        now = utc_now()
        return cls(
            **details.model_dump(),
            views=0,
            created_at=now,
            updated_at=now,
        )

    def to_document(self) -> Dict[str, Any]:
        """Map to the MongoDB document shape (camelCase, no id)."""
        return self.model_dump(by_alias=True, exclude={"id"})

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "MedicineListing":
        """Map a MongoDB document back to the domain model."""
        data = dict(document)
        object_id = data.pop("_id", None)
        if object_id is not None:
            data["id"] = str(object_id)
        return cls.model_validate(data)

    # Derived presentation values

    @property
    def formatted_price(self) -> str:
        return f"{self.currency} {self.price:.2f}"

    @property
    def formatted_package_size(self) -> str:
        return self.package_size.formatted()

    @property
    def disease_summary(self) -> str:
        return _summarize(list(self.target_diseases))

    @property
    def plant_summary(self) -> str:
        return _summarize(list(self.target_plants))

    def time_ago(self, now: Optional[datetime] = None) -> str:
        """Human readable age of the listing."""
        now = now or utc_now()
        created_at = self.created_at
        if created_at.tzinfo is None:
            created_at = created_at.replace(tzinfo=timezone.utc)
        days = (now - created_at).days

        if days <= 0:
            return "Today"
        if days == 1:
            return "Yesterday"
        if days < 7:
            return f"{days} days ago"
        if days < 30:
            return f"{days // 7} weeks ago"
        return f"{days // 30} months ago"
