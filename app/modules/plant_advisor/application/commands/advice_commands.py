# 📄 File: app/modules/plant_advisor/application/commands/advice_commands.py
# 🧭 Purpose (Layman Explanation):
# Describes each kind of question a farmer can ask the plant doctor AI: a free question,
# a diagnosis from symptoms, a treatment plan, prevention advice, or details about a disease
# found in a photo.
# 🧪 Purpose (Technical Summary):
# CQRS command objects for advisor requests. Each command knows its required input, how to
# render its prompt template, and how to describe itself in the saved PromptRecord.
# 🔗 Dependencies:
# pydantic, prompt_templates, PromptRecord/PromptType
# 🔄 Connected Modules / Calls From:
# application.handlers.advice_handlers, presentation.api.schemas.advisor_schemas

from typing import Any, ClassVar, Dict, List, Optional

from pydantic import BaseModel, Field

from app.modules.plant_advisor.domain.models.prompt_record import PromptType
from app.modules.plant_advisor.domain.services import prompt_templates as templates
from app.modules.plant_advisor.domain.services.prompt_templates import NOT_SPECIFIED


def _label(value: Optional[Any]) -> str:
    return NOT_SPECIFIED if value is None or value == "" else str(value)


class AdviceCommand(BaseModel):
    """
    Base class for advisor requests.

    Subclasses declare which input is mandatory (`required_field`, by its
    wire name) and the message returned when it is missing or blank.
    """

    prompt_type: ClassVar[PromptType] = PromptType.GENERAL
    required_field: ClassVar[str] = "prompt"
    required_message: ClassVar[str] = "Prompt is required"
    failure_message: ClassVar[str] = "Failed to generate content"

    def required_value(self) -> Optional[str]:
        raise NotImplementedError

    def build_prompt(self) -> str:
        raise NotImplementedError

    def record_summary(self) -> str:
        """userPrompt stored with the exchange"""
        raise NotImplementedError

    def record_fields(self) -> Dict[str, Any]:
        """Extra PromptRecord attributes"""
        return {}


class GeneralPromptCommand(AdviceCommand):
    prompt: Optional[str] = None

    def required_value(self) -> Optional[str]:
        return self.prompt

    def build_prompt(self) -> str:
        return templates.general_prompt(self.prompt)

    def record_summary(self) -> str:
        return self.prompt


class DiagnoseDiseaseCommand(AdviceCommand):
    prompt_type: ClassVar[PromptType] = PromptType.DIAGNOSIS
    required_field: ClassVar[str] = "symptoms"
    required_message: ClassVar[str] = "Disease symptoms are required"
    failure_message: ClassVar[str] = "Failed to diagnose disease"

    symptoms: Optional[str] = None
    plant_type: Optional[str] = None
    location: Optional[str] = None
    images: Optional[List[str]] = None

    def required_value(self) -> Optional[str]:
        return self.symptoms

    def build_prompt(self) -> str:
        return templates.diagnosis_prompt(
            self.symptoms,
            plant_type=self.plant_type,
            location=self.location,
            has_images=bool(self.images),
        )

    def record_summary(self) -> str:
        return f"DIAGNOSIS REQUEST - Plant: {_label(self.plant_type)}, Symptoms: {self.symptoms}"

    def record_fields(self) -> Dict[str, Any]:
        return {"plant_type": self.plant_type, "region": self.location}


class TreatmentCommand(AdviceCommand):
    prompt_type: ClassVar[PromptType] = PromptType.TREATMENT
    required_field: ClassVar[str] = "disease"
    required_message: ClassVar[str] = "Disease name is required"
    failure_message: ClassVar[str] = "Failed to generate treatment recommendations"

    disease: Optional[str] = None
    plant_type: Optional[str] = None
    severity: Optional[str] = None
    organic_only: bool = False

    def required_value(self) -> Optional[str]:
        return self.disease

    def build_prompt(self) -> str:
        return templates.treatment_prompt(
            self.disease,
            plant_type=self.plant_type,
            severity=self.severity,
            organic_only=self.organic_only,
        )

    def record_summary(self) -> str:
        return f"TREATMENT REQUEST - Disease: {self.disease}, Plant: {_label(self.plant_type)}"

    def record_fields(self) -> Dict[str, Any]:
        return {
            "plant_type": self.plant_type,
            "disease_type": self.disease,
            "severity": self.severity,
            "organic_only": self.organic_only,
        }


class PreventionCommand(AdviceCommand):
    prompt_type: ClassVar[PromptType] = PromptType.PREVENTION
    required_field: ClassVar[str] = "plantType"
    required_message: ClassVar[str] = "Plant type is required"
    failure_message: ClassVar[str] = "Failed to generate prevention strategies"

    plant_type: Optional[str] = None
    region: Optional[str] = None
    season: Optional[str] = None
    common_diseases: Optional[str] = None

    def required_value(self) -> Optional[str]:
        return self.plant_type

    def build_prompt(self) -> str:
        return templates.prevention_prompt(
            self.plant_type,
            region=self.region,
            season=self.season,
            common_diseases=self.common_diseases,
        )

    def record_summary(self) -> str:
        return f"PREVENTION REQUEST - Plant: {self.plant_type}, Region: {_label(self.region)}"

    def record_fields(self) -> Dict[str, Any]:
        return {"plant_type": self.plant_type, "region": self.region}


class DiseaseInfoCommand(AdviceCommand):
    """Profile of a disease reported by the image classifier."""

    prompt_type: ClassVar[PromptType] = PromptType.DISEASE_INFO
    required_field: ClassVar[str] = "diseaseName"
    required_message: ClassVar[str] = "Disease name is required"
    failure_message: ClassVar[str] = "Failed to generate disease information"

    disease_name: Optional[str] = None
    plant_type: Optional[str] = None
    confidence: Optional[float] = Field(default=None, ge=0, le=100)
    additional_info: Optional[str] = None

    def required_value(self) -> Optional[str]:
        return self.disease_name

    def build_prompt(self) -> str:
        return templates.disease_info_prompt(
            self.disease_name,
            plant_type=self.plant_type,
            confidence=self.confidence,
            additional_info=self.additional_info,
        )

    def record_summary(self) -> str:
        return (
            f"DISEASE INFO REQUEST - Disease: {self.disease_name}, "
            f"Plant: {_label(self.plant_type)}, "
            f"Confidence: {templates.format_confidence(self.confidence)}"
        )

    def record_fields(self) -> Dict[str, Any]:
        return {
            "plant_type": self.plant_type,
            "disease_type": self.disease_name,
            "confidence": self.confidence,
        }


class DetectedDiseaseTreatmentCommand(AdviceCommand):
    """Treatment plan for a disease reported by the image classifier."""

    prompt_type: ClassVar[PromptType] = PromptType.AI_TREATMENT
    required_field: ClassVar[str] = "diseaseName"
    required_message: ClassVar[str] = "Disease name is required"
    failure_message: ClassVar[str] = "Failed to generate treatment recommendations"

    disease_name: Optional[str] = None
    plant_type: Optional[str] = None
    confidence: Optional[float] = Field(default=None, ge=0, le=100)
    severity: Optional[str] = None
    organic_preference: bool = False
    location: Optional[str] = None

    def required_value(self) -> Optional[str]:
        return self.disease_name

    def build_prompt(self) -> str:
        return templates.detected_disease_treatment_prompt(
            self.disease_name,
            plant_type=self.plant_type,
            confidence=self.confidence,
            severity=self.severity,
            organic_preference=self.organic_preference,
            location=self.location,
        )

    def record_summary(self) -> str:
        return (
            f"AI TREATMENT REQUEST - Disease: {self.disease_name}, "
            f"Plant: {_label(self.plant_type)}, "
            f"Confidence: {templates.format_confidence(self.confidence)}"
        )

    def record_fields(self) -> Dict[str, Any]:
        return {
            "plant_type": self.plant_type,
            "disease_type": self.disease_name,
            "confidence": self.confidence,
            "severity": self.severity,
            "region": self.location,
            "organic_only": self.organic_preference,
        }


class DeletePromptCommand(BaseModel):
    prompt_id: str
