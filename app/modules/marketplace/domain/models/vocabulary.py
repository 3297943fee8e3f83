# 📄 File: app/modules/marketplace/domain/models/vocabulary.py
# 🧭 Purpose (Layman Explanation):
# The official word lists of the marketplace: which medicine types, diseases, plants,
# package units and so on a listing is allowed to use.
# 🧪 Purpose (Technical Summary):
# String enumerations shared by request validation, the domain model, path parameters
# and the metadata endpoint, so every layer accepts exactly the same values.
# 🔗 Dependencies:
# enum, typing
# 🔄 Connected Modules / Calls From:
# medicine.py, query_builder.py, medicine_schemas.py, marketplace.py (routes)

from enum import Enum
from typing import Dict, List


class Currency(str, Enum):
    """Currencies a listing can be priced in"""
    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    RWF = "RWF"
    KES = "KES"
    UGX = "UGX"
    TZS = "TZS"


class MedicineType(str, Enum):
    """Treatment category of a medicine"""
    FUNGICIDE = "Fungicide"
    BACTERICIDE = "Bactericide"
    ORGANIC_TREATMENT = "Organic Treatment"
    BIOLOGICAL_CONTROL = "Biological Control"
    CHEMICAL_PESTICIDE = "Chemical Pesticide"
    PREVENTIVE_TREATMENT = "Preventive Treatment"
    SYSTEMIC_TREATMENT = "Systemic Treatment"
    CONTACT_TREATMENT = "Contact Treatment"
    COPPER_BASED = "Copper-based"
    SULFUR_BASED = "Sulfur-based"


class TargetDisease(str, Enum):
    """Diseases a medicine can be listed against"""
    EARLY_BLIGHT = "Early Blight"
    LATE_BLIGHT = "Late Blight"
    POWDERY_MILDEW = "Powdery Mildew"
    DOWNY_MILDEW = "Downy Mildew"
    BLACK_SPOT = "Black Spot"
    RUST = "Rust"
    ANTHRACNOSE = "Anthracnose"
    BACTERIAL_WILT = "Bacterial Wilt"
    FUSARIUM_WILT = "Fusarium Wilt"
    VERTICILLIUM_WILT = "Verticillium Wilt"
    ROOT_ROT = "Root Rot"
    LEAF_SPOT = "Leaf Spot"
    CANKER = "Canker"
    FIRE_BLIGHT = "Fire Blight"
    SCAB = "Scab"
    MOSAIC_VIRUS = "Mosaic Virus"
    YELLOWING = "Yellowing"
    BLIGHT = "Blight"
    OTHER = "Other"


class TargetPlant(str, Enum):
    """Crops a medicine can be listed for"""
    TOMATO = "Tomato"
    POTATO = "Potato"
    PEPPER = "Pepper"
    CUCUMBER = "Cucumber"
    LETTUCE = "Lettuce"
    CABBAGE = "Cabbage"
    CARROT = "Carrot"
    ONION = "Onion"
    BEAN = "Bean"
    PEA = "Pea"
    CORN = "Corn"
    WHEAT = "Wheat"
    RICE = "Rice"
    APPLE = "Apple"
    GRAPE = "Grape"
    ROSE = "Rose"
    CITRUS = "Citrus"
    STRAWBERRY = "Strawberry"
    GENERAL_VEGETABLES = "General Vegetables"
    GENERAL_FRUITS = "General Fruits"
    GENERAL_ORNAMENTALS = "General Ornamentals"
    ALL_PLANTS = "All Plants"


class ApplicationMethod(str, Enum):
    """How the product is applied"""
    FOLIAR_SPRAY = "Foliar Spray"
    SOIL_DRENCH = "Soil Drench"
    SEED_TREATMENT = "Seed Treatment"
    ROOT_DIP = "Root Dip"
    INJECTION = "Injection"
    DUSTING = "Dusting"
    GRANULAR_APPLICATION = "Granular Application"
    SYSTEMIC_APPLICATION = "Systemic Application"


class PackageUnit(str, Enum):
    """Units for package size"""
    ML = "ml"
    L = "L"
    G = "g"
    KG = "kg"
    OZ = "oz"
    LB = "lb"
    TABLETS = "tablets"
    SACHETS = "sachets"


class Condition(str, Enum):
    """Product condition, best first"""
    NEW = "New"
    LIKE_NEW = "Like New"
    GOOD = "Good"
    FAIR = "Fair"
    POOR = "Poor"


class Availability(str, Enum):
    """Listing availability status"""
    AVAILABLE = "Available"
    SOLD = "Sold"
    RESERVED = "Reserved"
    UNAVAILABLE = "Unavailable"


class BusinessType(str, Enum):
    """Kind of seller"""
    AGRICULTURAL_STORE = "Agricultural Store"
    PHARMACY = "Pharmacy"
    ONLINE_RETAILER = "Online Retailer"
    MANUFACTURER = "Manufacturer"
    DISTRIBUTOR = "Distributor"
    INDIVIDUAL_SELLER = "Individual Seller"


class Certification(str, Enum):
    """Seller certifications"""
    ORGANIC_CERTIFIED = "Organic Certified"
    EPA_REGISTERED = "EPA Registered"
    FDA_APPROVED = "FDA Approved"
    ISO_CERTIFIED = "ISO Certified"
    LOCAL_AUTHORITY_APPROVED = "Local Authority Approved"


class SortField(str, Enum):
    """Fields a listing query may be ordered by"""
    CREATED_AT = "createdAt"
    UPDATED_AT = "updatedAt"
    PRICE = "price"
    NAME = "name"
    VIEWS = "views"
    QUANTITY = "quantity"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @property
    def direction(self) -> int:
        """MongoDB sort direction."""
        return 1 if self is SortOrder.ASC else -1


def enum_values(enum_cls) -> List[str]:
    """Return the raw string values of a vocabulary enum."""
    return [member.value for member in enum_cls]


def marketplace_vocabularies() -> Dict[str, List[str]]:
    """All vocabularies keyed the way the metadata endpoint exposes them."""
    return {
        "medicineTypes": enum_values(MedicineType),
        "targetDiseases": enum_values(TargetDisease),
        "targetPlants": enum_values(TargetPlant),
        "applicationMethods": enum_values(ApplicationMethod),
        "packageUnits": enum_values(PackageUnit),
        "conditions": enum_values(Condition),
        "currencies": enum_values(Currency),
        "availability": enum_values(Availability),
        "businessTypes": enum_values(BusinessType),
        "certifications": enum_values(Certification),
        "sortFields": enum_values(SortField),
    }
