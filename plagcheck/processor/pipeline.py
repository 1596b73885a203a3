from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from plagcheck.processor.models import SubmissionDocument
from plagcheck.report.models import PeerSubmission, SimilarityReport


@dataclass(slots=True)
class PipelineContext:
    document: SubmissionDocument
    peers: list[PeerSubmission] = field(default_factory=list)
    extracted_text: str | None = None
    normalized_text: str | None = None
    content_hash: str | None = None
    report: SimilarityReport | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
