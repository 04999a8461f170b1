from pydantic import BaseModel
from typing import Any, Dict, List, Optional


# -------------------------
# Save to Drive
# -------------------------
class SaveToDriveRequest(BaseModel):
    title: Optional[str] = None
    content: str = ""
    accessToken: Optional[str] = None


class SaveToDriveResponse(BaseModel):
    success: bool
    documentId: str
    documentUrl: str


# -------------------------
# Listing
# -------------------------
class DriveDocument(BaseModel):
    id: str
    name: Optional[str] = None
    webViewLink: Optional[str] = None
    createdTime: Optional[str] = None
    modifiedTime: Optional[str] = None


class DocumentListResponse(BaseModel):
    success: bool
    documents: List[DriveDocument]


# -------------------------
# Compile preview
# -------------------------
class CompileRequest(BaseModel):
    content: str = ""


class CompileResponse(BaseModel):
    operations: int
    requests: List[Dict[str, Any]]
