import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from fastapi import Depends, FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel

from quote_configurator.config.settings import get_settings
from quote_configurator.engine import format_price, format_price_range, visible_questions
from quote_configurator.services.configurator_service import ConfiguratorService

logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Quote Configurator API",
    description="Question visibility and price estimates for the product configurator",
    version="1.0.0"
)

# Enable CORS for the public wizard
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@lru_cache
def get_service() -> ConfiguratorService:
    return ConfiguratorService(get_settings())


class EstimateRequest(BaseModel):
    product_slug: str
    answers: Dict[str, Any] = {}
    site: Optional[str] = None
    only_visible: bool = False


class VisibilityRequest(BaseModel):
    product_slug: str
    answers: Dict[str, Any] = {}
    site: Optional[str] = None


@app.get("/")
async def root():
    return {"status": "online", "message": "Quote Configurator API Active"}


@app.get("/api/configurator/questions")
async def get_questions(
    product: Optional[str] = None,
    site: Optional[str] = None,
    service: ConfiguratorService = Depends(get_service),
):
    if not product:
        raise HTTPException(status_code=400, detail="Product parameter is required")
    try:
        questions, source = service.get_questions(product, site)
    except Exception as e:
        logger.exception("Error fetching configurator questions")
        raise HTTPException(status_code=500, detail=str(e))
    return {"questions": [q.to_dict() for q in questions], "source": source}


@app.get("/api/configurator/pricing")
async def get_pricing(
    product: Optional[str] = None,
    site: Optional[str] = None,
    service: ConfiguratorService = Depends(get_service),
):
    if not product:
        raise HTTPException(status_code=400, detail="Product parameter is required")
    try:
        pricing, source = service.get_pricing(product, site)
    except Exception as e:
        logger.exception("Error fetching configurator pricing")
        raise HTTPException(status_code=500, detail=str(e))

    if pricing is None:
        raise HTTPException(status_code=404, detail="No pricing configured for this product")

    return {
        "pricing": {
            **pricing.to_dict(),
            "base_price_min_formatted": format_price(pricing.base_price_min),
            "base_price_max_formatted": format_price(pricing.base_price_max),
            "base_price_range_formatted": format_price_range(
                pricing.base_price_min, pricing.base_price_max
            ),
        },
        "source": source,
    }


@app.post("/api/configurator/estimate")
async def estimate(req: EstimateRequest, service: ConfiguratorService = Depends(get_service)):
    try:
        result = service.estimate(
            req.product_slug, req.answers, site_slug=req.site, only_visible=req.only_visible
        )
    except Exception as e:
        logger.exception("Error calculating estimate for %s", req.product_slug)
        raise HTTPException(status_code=500, detail=str(e))
    return {**result.to_dict(), "formatted": format_price_range(result.min, result.max)}


@app.post("/api/configurator/visibility")
async def visibility(req: VisibilityRequest, service: ConfiguratorService = Depends(get_service)):
    try:
        questions, _ = service.get_questions(req.product_slug, req.site)
    except Exception as e:
        logger.exception("Error resolving visibility for %s", req.product_slug)
        raise HTTPException(status_code=500, detail=str(e))
    return {"visible": [q.question_key for q in visible_questions(questions, req.answers)]}
