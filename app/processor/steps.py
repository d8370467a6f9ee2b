import asyncio

from app.logging.logger import Log
from app.normalization.base import BaseNormalizer
from app.normalization.models import NormalizedResult
from app.processor.pipeline import PipelineContext, PipelineStep
from app.recognition.extractor import TextExtractor
from app.rendering.scheduler import RenderScheduler


class RenderPagesStep(PipelineStep):
    """Rasterizes the pages of PDF uploads; other files pass through."""

    def __init__(self, scheduler: RenderScheduler) -> None:
        self._scheduler = scheduler

    async def run(self, context: PipelineContext) -> PipelineContext:
        if not context.file.is_pdf:
            return context
        report = await self._scheduler.render_all(
            context.file.stored_path,
            document_id=context.file.sanitized_name,
        )
        context.render_report = report
        context.images = report.image_paths
        context.failed_pages = report.failed_pages
        Log.info(
            f"Converted {context.file.sanitized_name} to {len(context.images)} image(s)"
        )
        return context


class ExtractTextStep(PipelineStep):
    """Runs OCR on page images of PDFs, or on the upload itself for images."""

    def __init__(self, extractor: TextExtractor) -> None:
        self._extractor = extractor

    async def run(self, context: PipelineContext) -> PipelineContext:
        file = context.file
        if file.is_pdf:
            sources = context.images
        elif file.is_image:
            sources = [file.stored_path]
        else:
            Log.warning(
                f"Skipping text extraction for {file.sanitized_name}: "
                f"unsupported content type {file.mime_type}"
            )
            return context

        for path in sources:
            context.extracted.append(
                await self._extractor.extract(path, file.declared_language)
            )
        return context


class NormalizeTextStep(PipelineStep):
    """Spell-corrects every extracted text in its declared language."""

    def __init__(self, normalizer: BaseNormalizer) -> None:
        self._normalizer = normalizer

    async def run(self, context: PipelineContext) -> PipelineContext:
        for extracted in context.extracted:
            corrected = await asyncio.to_thread(
                self._normalizer.normalize, extracted.raw_text, extracted.language
            )
            Log.debug(f"Corrected text of {extracted.source_path}: {corrected}")
            context.normalized.append(
                NormalizedResult(
                    source_path=extracted.source_path,
                    corrected_text=corrected,
                    language=extracted.language,
                )
            )
        return context
