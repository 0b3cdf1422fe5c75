"""POST /api/generate — connect to SQL Server, fetch metadata, return DBML."""
import logging
from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import PlainTextResponse

from mssql_dbml.core.dbml_generator import generate_dbml
from mssql_dbml.models.connection import ConnectionRequest, SchemaFilter
from mssql_dbml.models.dbml import DBMLResponse, GenerateRequest

router = APIRouter()
logger = logging.getLogger(__name__)


def _resolve_connection(req: GenerateRequest) -> ConnectionRequest:
    if req.connection_string:
        return ConnectionRequest.from_connection_string(req.connection_string)
    if req.connection:
        return req.connection
    raise ValueError("Either 'connection' or 'connection_string' is required")


def _resolve_filter(req: GenerateRequest) -> SchemaFilter:
    if req.exclude_schemas is None:
        return SchemaFilter(include=req.include_schemas)
    return SchemaFilter(include=req.include_schemas, exclude=req.exclude_schemas)


@router.post("/generate", response_model=DBMLResponse)
def generate(req: GenerateRequest, format: str = Query("json", pattern="^(json|dbml)$")):
    try:
        doc = generate_dbml(_resolve_connection(req), _resolve_filter(req))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("DBML generation failed")
        raise HTTPException(status_code=500, detail=f"Generation error: {e}")

    if format == "dbml":
        return PlainTextResponse(content=doc.text)
    return DBMLResponse.from_document(doc)
