from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from typing import Dict, Any

from .builder import TspBuilder
from .config import ParserConfig
from .errors import ParseTspError, UnknownNodeError
from .models import (
    ParseRequest, ParseResponse,
    HeaderRequest, HeaderResponse,
    WeightsRequest, WeightsResponse,
)

app = FastAPI(title="TSPLIB Parser", version="0.1")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_methods=["*"], allow_headers=["*"],
)

def _parse(text: str, strict: bool = False):
    try:
        return TspBuilder.parse_str(text, ParserConfig(strict_weights=strict))
    except ParseTspError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "healthy"}

@app.post("/parse", response_model=ParseResponse)
def endpoint_parse(req: ParseRequest) -> Dict[str, Any]:
    tsp = _parse(req.text, req.strict)
    return {"status": "ok", "instance": tsp}

@app.post("/header", response_model=HeaderResponse)
def endpoint_header(req: HeaderRequest) -> Dict[str, Any]:
    return {"status": "ok", "header": TspBuilder.scan_header_str(req.text)}

@app.post("/weights", response_model=WeightsResponse)
def endpoint_weights(req: WeightsRequest) -> Dict[str, Any]:
    tsp = _parse(req.text, req.strict)
    try:
        weights = [tsp.weight(a, b) for a, b in req.pairs]
    except UnknownNodeError as e:
        raise HTTPException(status_code=404, detail=str(e)) from e
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    return {"status": "ok", "weights": weights}

def serve(host: str = "127.0.0.1", port: int = 8000) -> None:
    import uvicorn
    uvicorn.run(app, host=host, port=port, log_level="info")


if __name__ == "__main__":
    serve()
