"""FastAPI application for the catalog service."""

import logging
from typing import Annotated, Any, Literal

from fastapi import Body, FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from src.config import DEFAULT_PAGE_LIMIT, LOG_LEVEL, MAX_PAGE_LIMIT
from src.db.postgres_client import db
from src.services.course_part_service import course_part_service
from src.services.course_service import course_service
from src.services.errors import ServiceError
from src.services.image_service import image_service
from src.services.owner_adapters import image_owners, video_owners
from src.services.physical_good_service import physical_good_service
from src.services.product_service import product_service
from src.services.seminar_service import seminar_service
from src.services.training_session_service import training_session_service
from src.services.video_service import video_manager

# Configure logging
logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Catalog API",
    description="Catalog of courses, training sessions, seminars and physical goods with their products and media",
    version="1.0.0",
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# URL segment -> owner type
FAMILIES = {
    "courses": "course",
    "training-sessions": "training_session",
    "seminars": "seminar",
    "physical-goods": "physical_good",
    "course-parts": "course_part",
}

LIFECYCLE_SERVICES = {
    "courses": course_service,
    "training-sessions": training_session_service,
    "seminars": seminar_service,
    "physical-goods": physical_good_service,
}

IMAGE_OWNERS = image_owners(db)
VIDEO_OWNERS = video_owners(db)

PageLimit = Annotated[int, Query(ge=1, le=MAX_PAGE_LIMIT)]
PageOffset = Annotated[int, Query(ge=0)]
Include = Literal["published", "unpublished", "deleted"]


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError):
    if exc.code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    return JSONResponse(status_code=exc.code, content=exc.to_dict())


def _lifecycle(family: str):
    service = LIFECYCLE_SERVICES.get(family)
    if service is None:
        raise HTTPException(status_code=404, detail=f"Unknown catalog family: {family}")
    return service


def _owners(registry: dict[str, Any], family: str):
    owners = registry.get(FAMILIES.get(family, ""))
    if owners is None:
        raise HTTPException(status_code=404, detail=f"{family} do not support this media")
    return owners


# Health check endpoint
@app.get("/health")
def health_check():
    """Health check endpoint."""
    try:
        healthy = db.ping()
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        healthy = False
    return {"status": "healthy" if healthy else "degraded", "service": "Catalog API"}


# Product Endpoints
@app.get("/api/products")
def list_products(limit: PageLimit = DEFAULT_PAGE_LIMIT, offset: PageOffset = 0, details_type: str | None = None):
    """List published products, optionally of one details type."""
    return product_service.list(limit, offset, details_type)


@app.get("/api/products/by-details/{details_type}/{details_id}")
def get_product_by_details(details_type: str, details_id: str):
    return product_service.get_by_details_id(details_id, details_type)


@app.get("/api/products/{product_id}")
def get_product(product_id: str, include: Include = "published"):
    if include == "unpublished":
        return product_service.get_with_unpublished(product_id)
    if include == "deleted":
        return product_service.get_with_deleted(product_id)
    return product_service.get(product_id)


# Course Part Endpoints
@app.post("/api/course-parts", status_code=201)
def create_course_part(payload: dict[str, Any] = Body(...)):
    return course_part_service.create(payload)


@app.get("/api/courses/{course_id}/parts")
def list_course_parts(
    course_id: str,
    limit: PageLimit = DEFAULT_PAGE_LIMIT,
    offset: PageOffset = 0,
    include_unpublished: bool = False,
):
    return course_part_service.list(course_id, limit, offset, include_unpublished)


@app.get("/api/course-parts/{part_id}")
def get_course_part(part_id: str, include_unpublished: bool = False):
    if include_unpublished:
        return course_part_service.get_with_unpublished(part_id)
    return course_part_service.get(part_id)


@app.patch("/api/course-parts/{part_id}")
def update_course_part(part_id: str, payload: dict[str, Any] = Body(...)):
    return course_part_service.update({**payload, "id": part_id})


@app.post("/api/course-parts/{part_id}/publish")
def publish_course_part(part_id: str):
    course_part_service.publish(part_id)
    return {"success": True}


@app.post("/api/course-parts/{part_id}/unpublish")
def unpublish_course_part(part_id: str):
    course_part_service.unpublish(part_id)
    return {"success": True}


# Image Endpoints
@app.post("/api/{family}/images/batch")
def add_image_batch(family: str, payload: dict[str, Any] = Body(...)):
    """Attach one image to several owners of a family."""
    affected = image_service.add_image_batch(payload, _owners(IMAGE_OWNERS, family))
    return {"affected": affected}


@app.post("/api/{family}/images/batch-delete")
def delete_image_batch(family: str, payload: dict[str, Any] = Body(...)):
    """Detach an image deleted in the media service from several owners."""
    affected = image_service.delete_image_batch(payload, _owners(IMAGE_OWNERS, family))
    return {"affected": affected}


@app.post("/api/{family}/{owner_id}/images", status_code=201)
def add_image(family: str, owner_id: str, payload: dict[str, Any] = Body(...)):
    image_service.add_image({**payload, "owner_id": owner_id}, _owners(IMAGE_OWNERS, family))
    return {"success": True}


@app.delete("/api/{family}/{owner_id}/images/{media_service_id}")
def delete_image(family: str, owner_id: str, media_service_id: str):
    image_service.delete_image(
        {"owner_id": owner_id, "media_service_id": media_service_id}, _owners(IMAGE_OWNERS, family)
    )
    return {"success": True}


# Video Endpoints
@app.put("/api/{family}/{owner_id}/video")
def add_video(family: str, owner_id: str, media_service_id: str = Body(..., embed=True)):
    video_manager.add({"owner_id": owner_id, "media_service_id": media_service_id}, _owners(VIDEO_OWNERS, family))
    return {"success": True}


@app.delete("/api/{family}/{owner_id}/video")
def remove_video(family: str, owner_id: str):
    video_manager.remove({"owner_id": owner_id}, _owners(VIDEO_OWNERS, family))
    return {"success": True}


# Lifecycle Endpoints
@app.post("/api/{family}", status_code=201)
def create_item(family: str, payload: dict[str, Any] = Body(...)):
    """Create an unpublished item together with its product."""
    return _lifecycle(family).create(payload)


@app.get("/api/{family}")
def list_items(family: str, limit: PageLimit = DEFAULT_PAGE_LIMIT, offset: PageOffset = 0):
    return _lifecycle(family).list(limit, offset)


@app.get("/api/{family}/unpublished")
def list_unpublished_items(family: str, limit: PageLimit = DEFAULT_PAGE_LIMIT, offset: PageOffset = 0):
    return _lifecycle(family).list_unpublished(limit, offset)


@app.get("/api/{family}/deleted")
def list_deleted_items(family: str, limit: PageLimit = DEFAULT_PAGE_LIMIT, offset: PageOffset = 0):
    return _lifecycle(family).list_deleted(limit, offset)


@app.get("/api/{family}/{item_id}")
def get_item(family: str, item_id: str, include: Include = "published"):
    service = _lifecycle(family)
    if include == "unpublished":
        return service.get_with_unpublished(item_id)
    if include == "deleted":
        return service.get_with_deleted(item_id)
    return service.get(item_id)


@app.patch("/api/{family}/{item_id}")
def update_item(family: str, item_id: str, payload: dict[str, Any] = Body(...)):
    """Apply changed fields and return what was written."""
    return _lifecycle(family).update({**payload, "id": item_id})


@app.post("/api/{family}/{item_id}/publish")
def publish_item(family: str, item_id: str):
    _lifecycle(family).publish(item_id)
    return {"success": True}


@app.post("/api/{family}/{item_id}/unpublish")
def unpublish_item(family: str, item_id: str):
    _lifecycle(family).unpublish(item_id)
    return {"success": True}


@app.post("/api/{family}/{item_id}/restore")
def restore_item(family: str, item_id: str):
    _lifecycle(family).restore(item_id)
    return {"success": True}


@app.delete("/api/{family}/{item_id}")
def delete_item(family: str, item_id: str):
    _lifecycle(family).delete(item_id)
    return {"success": True}


@app.delete("/api/{family}/{item_id}/permanent")
def delete_item_permanent(family: str, item_id: str):
    _lifecycle(family).delete_permanent(item_id)
    return {"success": True}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
