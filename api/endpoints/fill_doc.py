from fastapi import APIRouter, Depends
from api.dependencies import get_document_filler
from domain.schemas import FillDocRequest, FillDocResponse
from domain.services.document_filler import DocumentFiller

router = APIRouter()


@router.post("/api/fill-doc", response_model=FillDocResponse)
def fill_doc(body: FillDocRequest,
             filler: DocumentFiller = Depends(get_document_filler)) -> FillDocResponse:
    doc = filler.fill(body.student_name, body.answers)
    return FillDocResponse(
        filename=doc.filename,
        saved_path=doc.saved_path,
        base64_docx=doc.as_base64(),
    )
