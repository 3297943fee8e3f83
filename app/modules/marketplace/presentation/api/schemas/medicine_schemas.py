# 📄 File: app/modules/marketplace/presentation/api/schemas/medicine_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes exactly what a seller must send to list or edit a medicine, and how a listing
# looks when the app sends it back.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request schemas for listing creation and partial update, and the response
# serializer that adds derived display fields to stored listings.
#
# 🔗 Dependencies:
# - pydantic (v2) for request validation
# - app.modules.marketplace.domain.models (shared field rules and value objects)
#
# 🔄 Connected Modules / Calls From:
# - app.modules.marketplace.presentation.api.v1.marketplace

from typing import Any, Dict, List, Optional

from pydantic import Field, field_validator, model_validator

from app.modules.marketplace.domain.models.medicine import (
    MarketplaceModel,
    MedicineDetails,
    MedicineImage,
    MedicineListing,
    PackageSize,
    Seller,
    _normalize_tags,
)
from app.modules.marketplace.domain.models.vocabulary import (
    ApplicationMethod,
    Availability,
    Condition,
    Currency,
    MedicineType,
    TargetDisease,
    TargetPlant,
)

MEDICINE_EXAMPLE: Dict[str, Any] = {
    "name": "Copper Fungicide Pro",
    "description": "Broad spectrum copper fungicide for blights and leaf spots.",
    "price": 24.99,
    "currency": "USD",
    "medicineType": "Copper-based",
    "targetDiseases": ["Early Blight", "Late Blight"],
    "targetPlants": ["Tomato", "Potato"],
    "activeIngredient": "Copper hydroxide",
    "concentration": "50%",
    "applicationMethod": "Foliar Spray",
    "packageSize": {"value": 500, "unit": "ml"},
    "condition": "New",
    "images": [{"url": "https://cdn.example.com/copper-pro.jpg", "alt": "Bottle"}],
    "seller": {
        "name": "Kigali Agro Supplies",
        "email": "sales@kigaliagro.rw",
        "phone": "+250788000000",
        "location": {"city": "Kigali", "country": "Rwanda"},
    },
    "tags": ["copper", "organic"],
}


class MedicineCreateRequest(MedicineDetails):
    """
    Request body for creating a listing.

    Same rules as the stored listing: trimmed strings with length limits,
    vocabulary-only enums, non-empty disease/plant/image lists, valid seller
    email (stored lower-case) and non-negative numbers.
    """

    model_config = {"json_schema_extra": {"example": MEDICINE_EXAMPLE}}


class MedicineUpdateRequest(MarketplaceModel):
    """
    Request body for partial updates.

    Only the fields present in the body are changed. Present fields obey the
    same rules as on creation; sending null for a field is rejected.
    """

    name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    description: Optional[str] = Field(default=None, min_length=1, max_length=1000)
    price: Optional[float] = Field(default=None, ge=0)
    currency: Optional[Currency] = None
    medicine_type: Optional[MedicineType] = None
    target_diseases: Optional[List[TargetDisease]] = Field(default=None, min_length=1)
    target_plants: Optional[List[TargetPlant]] = Field(default=None, min_length=1)
    active_ingredient: Optional[str] = Field(default=None, min_length=1, max_length=200)
    concentration: Optional[str] = Field(default=None, min_length=1, max_length=50)
    application_method: Optional[ApplicationMethod] = None
    package_size: Optional[PackageSize] = None
    condition: Optional[Condition] = None
    images: Optional[List[MedicineImage]] = Field(default=None, min_length=1)
    seller: Optional[Seller] = None
    availability: Optional[Availability] = None
    quantity: Optional[int] = Field(default=None, ge=0)
    tags: Optional[List[str]] = None
    specifications: Optional[Dict[str, str]] = None
    featured: Optional[bool] = None
    negotiable: Optional[bool] = None

    @field_validator("tags")
    @classmethod
    def normalize_tags(cls, v: Optional[List[str]]) -> Optional[List[str]]:
        return _normalize_tags(v) if v is not None else v

    @model_validator(mode="after")
    def reject_explicit_nulls(self) -> "MedicineUpdateRequest":
        nulls = sorted(
            type(self).model_fields[name].alias or name
            for name in self.model_fields_set
            if getattr(self, name) is None
        )
        if nulls:
            raise ValueError(f"Fields cannot be null: {', '.join(nulls)}")
        return self

    def to_changes(self) -> Dict[str, Any]:
        """camelCase field -> stored value, for the fields present in the body."""
        dumped = self.model_dump(by_alias=True)
        changes = {}
        for name in self.model_fields_set:
            alias = type(self).model_fields[name].alias or name
            changes[alias] = dumped[alias]
        return changes


def serialize_medicine(listing: MedicineListing) -> Dict[str, Any]:
    """
    Render a listing for API responses.

    Adds the MongoDB-style `_id` alongside `id`, and the derived display
    fields (formattedPrice, formattedPackageSize, diseaseSummary,
    plantSummary, timeAgo).
    """
    data = listing.model_dump(by_alias=True, mode="json")
    return {
        "_id": listing.id,
        **data,
        "formattedPrice": listing.formatted_price,
        "formattedPackageSize": listing.formatted_package_size,
        "diseaseSummary": listing.disease_summary,
        "plantSummary": listing.plant_summary,
        "timeAgo": listing.time_ago(),
    }


def serialize_medicines(listings: List[MedicineListing]) -> List[Dict[str, Any]]:
    return [serialize_medicine(listing) for listing in listings]
