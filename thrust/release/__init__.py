"""Release bookkeeping: deployment history, deploy notes, artifact upload."""

from .deploy import DeployFlow, DeployRequest
from .errors import ReleaseError, UploadRejected
from .history import Deployed, DeploymentState, NeverDeployed, TagResolver
from .notes import NotesGenerator
from .response import UploadSucceeded, classify_upload_response
from .upload import UploadPipeline

__all__ = [
    "DeployFlow",
    "DeployRequest",
    "Deployed",
    "DeploymentState",
    "NeverDeployed",
    "NotesGenerator",
    "ReleaseError",
    "TagResolver",
    "UploadPipeline",
    "UploadRejected",
    "UploadSucceeded",
    "classify_upload_response",
]
