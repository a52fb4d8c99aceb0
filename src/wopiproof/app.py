from __future__ import annotations

import xml.etree.ElementTree as ET
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, Response

from .config import load_proof_config
from .obs.prom import prometheus_latest
from .proof.service import ProofService, proof_service_from_config
from .utils.logging import get_logger

load_dotenv()

log = get_logger()


def render_discovery(service: ProofService, net_zone: str) -> bytes:
    root = ET.Element("wopi-discovery")
    ET.SubElement(root, "net-zone", {"name": net_zone})
    if service.proof_key_attributes:
        ET.SubElement(root, "proof-key", dict(service.proof_key_attributes))
    return ET.tostring(root, encoding="utf-8", xml_declaration=True)


def create_app(service: Optional[ProofService] = None) -> FastAPI:
    cfg = load_proof_config()
    app = FastAPI(title="WOPI proof-key service")
    # one service per process; handlers reach it through app.state
    app.state.proof = service if service is not None else proof_service_from_config(cfg)
    app.state.net_zone = cfg.net_zone

    @app.get("/__health")
    async def health(request: Request):
        proof: ProofService = request.app.state.proof
        return {"status": "ok", "proof_key": proof.status().model_dump()}

    @app.get("/hosting/discovery")
    async def discovery(request: Request):
        body = render_discovery(request.app.state.proof, request.app.state.net_zone)
        return Response(content=body, media_type="text/xml")

    @app.get("/hosting/proof-key")
    async def proof_key(request: Request):
        attrs = request.app.state.proof.attributes_model()
        if attrs is None:
            raise HTTPException(status_code=404, detail="no proof key configured")
        return JSONResponse(attrs.model_dump())

    @app.get("/metrics")
    def metrics():
        body, content_type = prometheus_latest()
        return Response(body, media_type=content_type)

    return app


app = create_app()
