from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response

from api import config
from site_data.sitemap import build_sitemap_xml
from site_data.structured_data import JSON_LD

site_router = APIRouter(tags=["site"])


@site_router.get("/health")
def health_check():
    return {"status": "ok"}


@site_router.get("/sitemap.xml")
def sitemap():
    return Response(content=build_sitemap_xml(config.SITE_URL), media_type="application/xml")


@site_router.get("/structured-data.json")
def structured_data():
    return JSONResponse(content=JSON_LD, media_type="application/ld+json")
