"""API routes for parsing, scaling and converting ingredient measurements."""

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from drinkplanner.config import get_settings
from drinkplanner.kit.render import (
    format_recipe_text,
    format_share_preview,
    render_ingredients,
    scale_nutrition,
)
from drinkplanner.logging_config import LoggingContext, get_logger
from drinkplanner.normalize import (
    UnknownVocabularyError,
    clamp_servings,
    get_descriptors,
    list_pages,
    parse_ingredients,
    scale_amount,
    to_metric,
)
from drinkplanner.schemas import (
    DescriptorSource,
    IngredientLineSchema,
    MeasurementSchema,
    Nutrition,
    ScaledNutrition,
)

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1", tags=["measurements"])


# Request/Response schemas
class ParseRequest(DescriptorSource):
    """Ingredient lines to parse."""

    lines: list[str]


class ParseResponse(BaseModel):
    """Parsed measurements, in input order."""

    measurements: list[MeasurementSchema]


class ScaleRequest(BaseModel):
    """Amount to scale by a serving count."""

    amount: float | str
    servings: int


class ScaleResponse(BaseModel):
    display: str
    servings: int


class MetricRequest(BaseModel):
    """Serving-scaled amount to convert."""

    unit: str
    amount: float


class MetricResponse(BaseModel):
    amount: float
    unit: str


class RenderRequest(DescriptorSource):
    """Recipe to render for a serving count and display mode."""

    name: str
    lines: list[str]
    servings: int = Field(default_factory=lambda: get_settings().default_servings)
    metric: bool = False
    notes: str = ""
    nutrition: Nutrition | None = None


class RenderResponse(BaseModel):
    """Rendered recipe kit."""

    name: str
    servings: int
    metric: bool
    ingredients: list[IngredientLineSchema]
    nutrition: ScaledNutrition
    copy_text: str
    share_text: str


class VocabularyListResponse(BaseModel):
    pages: list[str]
    total: int


class VocabularyResponse(BaseModel):
    page: str
    descriptors: list[str]


def resolve_descriptors(source: DescriptorSource) -> set[str]:
    """Combine a page vocabulary with request-supplied descriptors."""
    words = {word.lower() for word in source.descriptors}
    if source.page:
        try:
            words |= get_descriptors(source.page)
        except UnknownVocabularyError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return words


def _clamp(servings: int) -> int:
    settings = get_settings()
    return clamp_servings(servings, settings.servings_min, settings.servings_max)


# =============================================================================
# Measurement Endpoints
# =============================================================================


@router.post("/measurements/parse", response_model=ParseResponse)
async def parse_lines(request: ParseRequest) -> ParseResponse:
    """Parse ingredient lines into structured measurements."""
    descriptors = resolve_descriptors(request)
    logger.info(f"Parsing {len(request.lines)} ingredient lines (page={request.page})")

    measurements = parse_ingredients(request.lines, descriptors)
    return ParseResponse(
        measurements=[MeasurementSchema.from_measurement(m) for m in measurements]
    )


@router.post("/measurements/scale", response_model=ScaleResponse)
async def scale(request: ScaleRequest) -> ScaleResponse:
    """
    Scale an amount by a serving count.

    Servings are clamped to the configured bounds. Non-numeric amounts
    are returned unchanged.
    """
    servings = _clamp(request.servings)
    return ScaleResponse(display=scale_amount(request.amount, servings), servings=servings)


@router.post("/measurements/metric", response_model=MetricResponse)
async def convert_to_metric(request: MetricRequest) -> MetricResponse:
    """Convert a US volume amount to milliliters."""
    converted = to_metric(request.unit, request.amount)
    return MetricResponse(amount=converted.amount, unit=converted.unit)


# =============================================================================
# Recipe Kit Endpoints
# =============================================================================


@router.post("/recipes/render", response_model=RenderResponse)
async def render_recipe(request: RenderRequest) -> RenderResponse:
    """
    Render a recipe kit: scaled ingredients, macros and shareable text.
    """
    descriptors = resolve_descriptors(request)
    servings = _clamp(request.servings)

    with LoggingContext(recipe_id=request.name):
        logger.info(f"Rendering recipe: servings={servings}, metric={request.metric}")

        measurements = parse_ingredients(request.lines, descriptors)
        lines = render_ingredients(measurements, servings, request.metric)
        nutrition = scale_nutrition(
            request.nutrition.model_dump() if request.nutrition else None,
            servings,
        )

    return RenderResponse(
        name=request.name,
        servings=servings,
        metric=request.metric,
        ingredients=[IngredientLineSchema.from_line(line) for line in lines],
        nutrition=ScaledNutrition(**nutrition),
        copy_text=format_recipe_text(request.name, lines, servings, request.notes),
        share_text=format_share_preview(request.name, lines, servings),
    )


# =============================================================================
# Vocabulary Endpoints
# =============================================================================


@router.get("/vocabularies", response_model=VocabularyListResponse)
async def list_vocabularies() -> VocabularyListResponse:
    """List page families with built-in descriptor vocabularies."""
    pages = list_pages()
    return VocabularyListResponse(pages=pages, total=len(pages))


@router.get("/vocabularies/{page}", response_model=VocabularyResponse)
async def get_vocabulary(page: str) -> VocabularyResponse:
    """Get the descriptor words for a page family."""
    try:
        descriptors = get_descriptors(page)
    except UnknownVocabularyError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))

    return VocabularyResponse(page=page, descriptors=sorted(descriptors))
