# 📄 File: app/modules/plant_advisor/presentation/api/v1/advisor.py
# 🧭 Purpose (Layman Explanation):
# The plant doctor's desk: farmers ask questions, describe symptoms, or send what the photo
# scanner found, and get expert-style advice back. They can also revisit saved advice.
#
# 🧪 Purpose (Technical Summary):
# FastAPI endpoints for AI advice generation (rate limited with slowapi) and prompt history
# (paged list, get, delete), rendering the uniform response envelope.
#
# 🔗 Dependencies:
# - FastAPI router, slowapi limiter
# - app.modules.plant_advisor.application (commands, queries, handlers)
# - app.modules.plant_advisor.presentation.api.schemas.advisor_schemas
#
# 🔄 Connected Modules / Calls From:
# - app.api.v1.router (mounted at /ai)

"""
Plant Advisor API Endpoints

Endpoints:
- POST /prompt: Free-form plant health question
- POST /diagnose: Diagnosis from symptoms
- POST /treatment: Treatment plan for a named disease
- POST /prevention: Prevention plan for a plant
- POST /disease-info: Profile of a classifier-detected disease
- POST /ai-treatment: Treatment plan for a classifier-detected disease
- GET /prompts: Saved exchanges, newest first
- GET /prompts/{prompt_id}: One saved exchange
- DELETE /prompts/{prompt_id}: Remove a saved exchange
"""

from fastapi import APIRouter, Depends, Query, Request

from app.api.middleware.rate_limiting import ai_rate_limit, limiter
from app.modules.plant_advisor.application.commands.advice_commands import DeletePromptCommand
from app.modules.plant_advisor.application.handlers.advice_handlers import (
    GenerateAdviceCommandHandler,
)
from app.modules.plant_advisor.application.handlers.prompt_handlers import (
    DeletePromptCommandHandler,
    GetPromptQueryHandler,
    ListPromptsQueryHandler,
)
from app.modules.plant_advisor.application.queries.prompt_queries import (
    GetPromptQuery,
    ListPromptsQuery,
)
from app.modules.plant_advisor.presentation.api.schemas.advisor_schemas import (
    AdvisorRequest,
    DetectedDiseaseTreatmentRequest,
    DiagnosisRequest,
    DiseaseInfoRequest,
    PreventionRequest,
    PromptRequest,
    TreatmentRequest,
)
from app.modules.plant_advisor.presentation.dependencies import (
    get_advice_handler,
    get_delete_prompt_handler,
    get_list_prompts_handler,
    get_prompt_handler,
)
from app.shared.config.settings import get_settings
from app.shared.utils.formatters import format_api_response, preview_text

settings = get_settings()

advisor_router = APIRouter()


async def _advise(
    body: AdvisorRequest,
    handler: GenerateAdviceCommandHandler,
    message: str
) -> dict:
    result = await handler.handle(body.to_command())
    return format_api_response(message, body.response_data(result))


# =========================================================================
# ADVICE ENDPOINTS
# =========================================================================

@advisor_router.post(
    "/prompt",
    summary="Ask the plant disease expert",
    responses={
        200: {"description": "Model answer; `saved` tells whether it was stored"},
        400: {"description": "Prompt is required"},
        401: {"description": "Invalid or missing API key"},
        504: {"description": "Model did not answer in time"},
    }
)
@limiter.limit(ai_rate_limit)
async def prompt_gemini(
    request: Request,
    body: PromptRequest,
    handler: GenerateAdviceCommandHandler = Depends(get_advice_handler),
) -> dict:
    return await _advise(body, handler, "Content generated successfully")


@advisor_router.post("/diagnose", summary="Diagnose a plant disease from symptoms")
@limiter.limit(ai_rate_limit)
async def diagnose_plant_disease(
    request: Request,
    body: DiagnosisRequest,
    handler: GenerateAdviceCommandHandler = Depends(get_advice_handler),
) -> dict:
    return await _advise(body, handler, "Disease diagnosis completed")


@advisor_router.post("/treatment", summary="Treatment recommendations for a disease")
@limiter.limit(ai_rate_limit)
async def get_treatment_recommendations(
    request: Request,
    body: TreatmentRequest,
    handler: GenerateAdviceCommandHandler = Depends(get_advice_handler),
) -> dict:
    return await _advise(body, handler, "Treatment recommendations generated")


@advisor_router.post("/prevention", summary="Prevention strategies for a plant")
@limiter.limit(ai_rate_limit)
async def get_prevention_strategies(
    request: Request,
    body: PreventionRequest,
    handler: GenerateAdviceCommandHandler = Depends(get_advice_handler),
) -> dict:
    return await _advise(body, handler, "Prevention strategies generated")


@advisor_router.post(
    "/disease-info",
    summary="Disease profile for a classifier result",
    description="Expects the disease name (and optionally confidence) produced by the image model",
)
@limiter.limit(ai_rate_limit)
async def get_disease_info(
    request: Request,
    body: DiseaseInfoRequest,
    handler: GenerateAdviceCommandHandler = Depends(get_advice_handler),
) -> dict:
    return await _advise(body, handler, "Disease information generated successfully")


@advisor_router.post("/ai-treatment", summary="Treatment plan for a classifier result")
@limiter.limit(ai_rate_limit)
async def get_treatment_for_detected_disease(
    request: Request,
    body: DetectedDiseaseTreatmentRequest,
    handler: GenerateAdviceCommandHandler = Depends(get_advice_handler),
) -> dict:
    return await _advise(body, handler, "AI-based treatment recommendations generated")


# =========================================================================
# PROMPT HISTORY ENDPOINTS
# =========================================================================

@advisor_router.get("/prompts", summary="List saved exchanges")
async def get_all_prompts(
    page: int = Query(1, ge=1),
    limit: int = Query(
        settings.PROMPTS_DEFAULT_PAGE_SIZE,
        ge=1,
        le=settings.MARKETPLACE_MAX_PAGE_SIZE
    ),
    handler: ListPromptsQueryHandler = Depends(get_list_prompts_handler),
) -> dict:
    result = await handler.handle(ListPromptsQuery(page=page, limit=limit))
    return format_api_response(
        "Prompts retrieved successfully",
        {
            "prompts": [record.to_response() for record in result.prompts],
            "pagination": result.pagination.to_dict(),
        }
    )


@advisor_router.get("/prompts/{prompt_id}", summary="Get a saved exchange")
async def get_prompt_by_id(
    prompt_id: str,
    handler: GetPromptQueryHandler = Depends(get_prompt_handler),
) -> dict:
    record = await handler.handle(GetPromptQuery(prompt_id=prompt_id))
    return format_api_response("Prompt retrieved successfully", record.to_response())


@advisor_router.delete("/prompts/{prompt_id}", summary="Delete a saved exchange")
async def delete_prompt(
    prompt_id: str,
    handler: DeletePromptCommandHandler = Depends(get_delete_prompt_handler),
) -> dict:
    removed = await handler.handle(DeletePromptCommand(prompt_id=prompt_id))
    return format_api_response(
        "Prompt deleted successfully",
        {"deletedPrompt": {"id": removed.id, "userPrompt": preview_text(removed.user_prompt)}}
    )
