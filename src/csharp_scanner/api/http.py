from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..config import API_TITLE, LOG_LEVEL
from ..core.document import CollectingErrorReporter
from ..core.locator import get_current_line, get_method_signature_text, get_property_signature_text
from ..core.models import CursorPosition, Editor, Signature, SignatureType, SourceText
from ..core.names import get_class_name, get_inherited_names, get_member_name, get_namespace
from ..core.signatures import get_full_signature_of_line
from ..core.usings import (
    get_line_ending,
    get_using_statements_from_text,
    replace_using_statements_from_text,
)

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


class TextRequest(BaseModel):
    text: str


class InheritedNamesRequest(TextRequest):
    include_base_classes: bool = True


class LineRequest(TextRequest):
    line: int = Field(ge=0)
    modifier: str = "public"


class CursorRequest(TextRequest):
    line: int = Field(ge=0)
    character: int = Field(default=0, ge=0)


class ReplaceUsingsRequest(TextRequest):
    statements: List[str]
    line_ending: Optional[str] = None  # detected from `text` when omitted


class NameResponse(BaseModel):
    name: Optional[str]
    errors: List[str] = []


class NamesResponse(BaseModel):
    names: List[str]


class SignatureResponse(BaseModel):
    signature: Optional[str]
    signature_type: SignatureType


class LineResponse(BaseModel):
    line: Optional[str]


class UsingsResponse(BaseModel):
    statements: List[str]


class TextResponse(BaseModel):
    text: str


def _signature_response(signature: Optional[Signature]) -> SignatureResponse:
    if signature is None:
        signature = Signature.unknown()
    return SignatureResponse(signature=signature.text, signature_type=signature.signature_type)


def _editor(req: CursorRequest) -> Editor:
    return Editor(
        document=SourceText.from_text(req.text),
        cursor=CursorPosition(line=req.line, character=req.character),
    )


app = FastAPI(title=API_TITLE)


@app.exception_handler(IndexError)
async def index_error_handler(request: Request, exc: IndexError):
    logger.warning(f"Rejected request to {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/health")
def health_endpoint() -> dict:
    return {"status": "ok"}


@app.post("/namespace", response_model=NameResponse)
def namespace_endpoint(req: TextRequest) -> NameResponse:
    reporter = CollectingErrorReporter()
    name = get_namespace(req.text, reporter)
    return NameResponse(name=name, errors=reporter.messages)


@app.post("/class-name", response_model=NameResponse)
def class_name_endpoint(req: TextRequest) -> NameResponse:
    reporter = CollectingErrorReporter()
    name = get_class_name(req.text, reporter)
    return NameResponse(name=name, errors=reporter.messages)


@app.post("/member-name", response_model=NameResponse)
def member_name_endpoint(req: TextRequest) -> NameResponse:
    return NameResponse(name=get_member_name(req.text))


@app.post("/inherited-names", response_model=NamesResponse)
def inherited_names_endpoint(req: InheritedNamesRequest) -> NamesResponse:
    return NamesResponse(names=get_inherited_names(req.text, req.include_base_classes))


@app.post("/signature/line", response_model=SignatureResponse)
def line_signature_endpoint(req: LineRequest) -> SignatureResponse:
    """Full signature of the member declared at `line`, joined across wrapped lines."""
    source = SourceText.from_text(req.text)
    return _signature_response(get_full_signature_of_line(req.modifier, source, req.line))


@app.post("/signature/method", response_model=SignatureResponse)
def method_signature_endpoint(req: CursorRequest) -> SignatureResponse:
    """Signature of the method whose body holds the cursor, or Unknown."""
    return _signature_response(get_method_signature_text(_editor(req)))


@app.post("/signature/property", response_model=SignatureResponse)
def property_signature_endpoint(req: CursorRequest) -> SignatureResponse:
    return _signature_response(get_property_signature_text(_editor(req)))


@app.post("/current-line", response_model=LineResponse)
def current_line_endpoint(req: CursorRequest) -> LineResponse:
    return LineResponse(line=get_current_line(_editor(req)))


@app.post("/line-ending", response_model=TextResponse)
def line_ending_endpoint(req: TextRequest) -> TextResponse:
    return TextResponse(text=get_line_ending(SourceText.from_text(req.text)))


@app.post("/usings", response_model=UsingsResponse)
def usings_endpoint(req: TextRequest) -> UsingsResponse:
    return UsingsResponse(statements=get_using_statements_from_text(req.text))


@app.post("/usings/replace", response_model=TextResponse)
def replace_usings_endpoint(req: ReplaceUsingsRequest) -> TextResponse:
    """Rewrite the leading using-block; the caller applies the returned text."""
    line_ending = req.line_ending or SourceText.from_text(req.text).line_ending
    logger.info(f"Replacing using-block with {len(req.statements)} statements")
    return TextResponse(text=replace_using_statements_from_text(req.text, req.statements, line_ending))
