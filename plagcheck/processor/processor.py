from collections.abc import Iterable
from pathlib import Path

from plagcheck.config.settings import Settings
from plagcheck.docx.python_docx_adapter import PythonDocxAdapter
from plagcheck.extraction.extractor import TextExtractor
from plagcheck.extraction.file_loader import FileLoader
from plagcheck.extraction.readers import DocxReader, JsonReader, PdfReader, PlainTextReader
from plagcheck.logging.logger import Log, WarningSink
from plagcheck.pdf.factory import PdfExtractorFactory
from plagcheck.processor.models import SubmissionAnalysis, SubmissionDocument
from plagcheck.processor.pipeline import PipelineContext, PipelineStep
from plagcheck.processor.steps import (
    BuildReportStep,
    ExtractTextStep,
    FingerprintStep,
    NormalizeStep,
)
from plagcheck.report.models import PeerSubmission


class Processor:
    """Runs one submission through the similarity pipeline.

    Pipeline: extract -> normalize -> fingerprint -> score against peers.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(
        self,
        document: SubmissionDocument,
        peers: Iterable[PeerSubmission],
    ) -> SubmissionAnalysis:
        context = PipelineContext(document=document, peers=list(peers))
        for step in self._steps:
            context = step.run(context)
        if context.report is None:
            raise ValueError("Pipeline finished without building a similarity report")
        return SubmissionAnalysis(extracted_text=context.extracted_text, report=context.report)


def build_text_extractor(
    settings: Settings,
    files_root: Path | None = None,
    warn: WarningSink = Log.warning,
) -> TextExtractor:
    """Build a TextExtractor reading every supported submission format."""
    file_loader = FileLoader(files_root=files_root or settings.files_root)
    readers = [
        PlainTextReader(),
        JsonReader(),
        PdfReader(PdfExtractorFactory.create(settings)),
        DocxReader(PythonDocxAdapter()),
    ]
    return TextExtractor(file_loader, readers, warn=warn)


def build_processor(
    settings: Settings,
    files_root: Path | None = None,
    warn: WarningSink = Log.warning,
) -> Processor:
    """Build a Processor with all required adapters."""
    Log.configure(settings.log_level)
    text_extractor = build_text_extractor(settings, files_root=files_root, warn=warn)
    return Processor(
        steps=[
            ExtractTextStep(text_extractor=text_extractor),
            NormalizeStep(),
            FingerprintStep(),
            BuildReportStep(),
        ]
    )
