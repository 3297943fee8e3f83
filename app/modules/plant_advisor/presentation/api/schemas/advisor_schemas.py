# 📄 File: app/modules/plant_advisor/presentation/api/schemas/advisor_schemas.py
# 🧭 Purpose (Layman Explanation):
# Describes what a farmer sends when asking the plant doctor AI a question, and what comes back.
#
# 🧪 Purpose (Technical Summary):
# Pydantic request schemas (camelCase on the wire) for the advisor endpoints. Each schema
# converts into its application command and shapes the endpoint's response payload.
# Mandatory inputs are optional here so that the handler can answer with the
# endpoint-specific "... is required" message.
#
# 🔗 Dependencies:
# - pydantic (v2)
# - app.modules.plant_advisor.application.commands.advice_commands
#
# 🔄 Connected Modules / Calls From:
# - app.modules.plant_advisor.presentation.api.v1.advisor

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.modules.plant_advisor.application.commands.advice_commands import (
    AdviceCommand,
    DetectedDiseaseTreatmentCommand,
    DiagnoseDiseaseCommand,
    DiseaseInfoCommand,
    GeneralPromptCommand,
    PreventionCommand,
    TreatmentCommand,
)
from app.modules.plant_advisor.application.handlers.advice_handlers import AdviceResult


class AdvisorRequest(BaseModel):
    """Base request: camelCase aliases, trimmed strings."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )

    command_class: ClassVar[Optional[type]] = None
    result_key: ClassVar[str] = "response"

    def to_command(self) -> AdviceCommand:
        return self.command_class(**self.model_dump())

    def response_data(self, result: AdviceResult) -> Dict[str, Any]:
        return {
            **self.echo(),
            self.result_key: result.text,
            "id": result.record_id,
            "saved": result.saved,
        }

    def echo(self) -> Dict[str, Any]:
        return {}


class PromptRequest(AdvisorRequest):
    command_class: ClassVar[type] = GeneralPromptCommand

    prompt: Optional[str] = Field(default=None, description="Free-form plant health question")

    def echo(self) -> Dict[str, Any]:
        return {"prompt": self.prompt}


class DiagnosisRequest(AdvisorRequest):
    command_class: ClassVar[type] = DiagnoseDiseaseCommand
    result_key: ClassVar[str] = "diagnosis"

    symptoms: Optional[str] = None
    plant_type: Optional[str] = None
    location: Optional[str] = None
    images: Optional[List[str]] = None

    def echo(self) -> Dict[str, Any]:
        return {"plantType": self.plant_type, "symptoms": self.symptoms}


class TreatmentRequest(AdvisorRequest):
    command_class: ClassVar[type] = TreatmentCommand
    result_key: ClassVar[str] = "recommendations"

    disease: Optional[str] = None
    plant_type: Optional[str] = None
    severity: Optional[str] = None
    organic_only: bool = False

    def echo(self) -> Dict[str, Any]:
        return {
            "disease": self.disease,
            "plantType": self.plant_type,
            "organicOnly": self.organic_only,
        }


class PreventionRequest(AdvisorRequest):
    command_class: ClassVar[type] = PreventionCommand
    result_key: ClassVar[str] = "strategies"

    plant_type: Optional[str] = None
    region: Optional[str] = None
    season: Optional[str] = None
    common_diseases: Optional[str] = None

    def echo(self) -> Dict[str, Any]:
        return {"plantType": self.plant_type, "region": self.region, "season": self.season}


class DiseaseInfoRequest(AdvisorRequest):
    """Disease reported by the image classifier"""

    command_class: ClassVar[type] = DiseaseInfoCommand
    result_key: ClassVar[str] = "diseaseInfo"

    disease_name: Optional[str] = None
    plant_type: Optional[str] = None
    confidence: Optional[float] = Field(default=None, ge=0, le=100, description="Percent")
    additional_info: Optional[str] = None

    def echo(self) -> Dict[str, Any]:
        return {
            "diseaseName": self.disease_name,
            "plantType": self.plant_type,
            "confidence": self.confidence,
        }


class DetectedDiseaseTreatmentRequest(AdvisorRequest):
    command_class: ClassVar[type] = DetectedDiseaseTreatmentCommand
    result_key: ClassVar[str] = "treatmentPlan"

    disease_name: Optional[str] = None
    plant_type: Optional[str] = None
    confidence: Optional[float] = Field(default=None, ge=0, le=100, description="Percent")
    severity: Optional[str] = None
    organic_preference: bool = False
    location: Optional[str] = None

    def echo(self) -> Dict[str, Any]:
        return {
            "diseaseName": self.disease_name,
            "plantType": self.plant_type,
            "confidence": self.confidence,
            "severity": self.severity,
            "organicPreference": self.organic_preference,
        }
