"""POST /api/render — render DBML from metadata records supplied by the caller."""
import logging
from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from mssql_dbml.core.document_builder import build_document
from mssql_dbml.models.dbml import DBMLResponse, RenderRequest

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("/render", response_model=DBMLResponse)
def render(req: RenderRequest, format: str = Query("json", pattern="^(json|dbml)$")):
    doc = build_document(req.columns, req.foreign_keys, req.header)
    logger.info(
        "Rendered %d tables, %d columns, %d foreign keys",
        doc.counts.tables, doc.counts.columns, doc.counts.foreign_keys,
    )
    if format == "dbml":
        return PlainTextResponse(content=doc.text)
    return DBMLResponse.from_document(doc)
