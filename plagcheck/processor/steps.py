from plagcheck.extraction.extractor import TextExtractor
from plagcheck.fingerprint.hasher import content_hash
from plagcheck.logging.logger import Log
from plagcheck.normalization.normalizer import normalize_text
from plagcheck.processor.pipeline import PipelineContext, PipelineStep
from plagcheck.report.builder import build_report


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        context.extracted_text = self._text_extractor.extract(
            context.document.files,
            context.document.text,
        )
        Log.info(
            f"Extracted {len(context.extracted_text or '')} chars from "
            f"{len(context.document.files)} files"
        )
        return context


class NormalizeStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.normalized_text = normalize_text(
            context.extracted_text or context.document.text
        )
        return context


class FingerprintStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.content_hash = content_hash(context.normalized_text)
        return context


class BuildReportStep(PipelineStep):
    def run(self, context: PipelineContext) -> PipelineContext:
        context.report = build_report(
            context.normalized_text,
            context.content_hash,
            context.peers,
        )
        Log.info(
            f"Compared against {len(context.peers)} peers: "
            f"score {context.report.score} ({context.report.category}), "
            f"{len(context.report.matches)} matches"
        )
        return context
