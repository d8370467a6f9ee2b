from app.config.settings import Settings
from app.logging.logger import Log
from app.normalization.factory import NormalizerFactory
from app.pdf.factory import PageSplitterFactory
from app.processor.models import IngestionResult, UploadedFile
from app.processor.pipeline import PipelineContext, PipelineStep
from app.processor.steps import ExtractTextStep, NormalizeTextStep, RenderPagesStep
from app.recognition.factory import TextExtractorFactory
from app.rendering.factory import RenderSurfaceFactory
from app.rendering.renderer import PageRenderer
from app.rendering.scheduler import RenderScheduler, discard_images


class Processor:
    """Orchestrates ingestion of the files of one upload request.

    Pipeline per file: render pages (PDF only) -> extract text -> normalize.
    Files are processed one after another so the render concurrency limit
    holds across the whole request.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    async def process(self, files: list[UploadedFile]) -> IngestionResult:
        """Run every file through the pipeline steps.

        Raises:
            MalformedDocumentError, RenderFailure, RecognitionFailure,
            NormalizationError: propagated from the failing step. Page
                images rendered for the request are removed first.
        """
        Log.info(f"Processing {len(files)} uploaded file(s)")
        result = IngestionResult()
        context: PipelineContext | None = None
        try:
            for file in files:
                Log.info(
                    f"Processing file {file.sanitized_name} with language: {file.declared_language}"
                )
                context = PipelineContext(file=file)
                for step in self._steps:
                    context = await step.run(context)
                result.files.append(context)
                context = None
        except Exception:
            pending = result.files + ([context] if context is not None else [])
            self._discard_rendered_images(pending)
            raise
        Log.info(f"Produced {len(result.normalized)} normalized text(s)")
        return result

    @staticmethod
    def _discard_rendered_images(contexts: list[PipelineContext]) -> None:
        for context in contexts:
            report = context.render_report
            if report is None:
                continue
            Log.warning(
                f"Removing {len(report.images)} rendered image(s) of "
                f"{context.file.sanitized_name} after failed request"
            )
            discard_images(report.image_paths, report.output_dir)


def build_processor(settings: Settings) -> Processor:
    """Build a Processor with all required adapters."""
    renderer = PageRenderer(
        sample_count=settings.render_sample_count,
        scale_factor=settings.render_scale,
        settle_delay_ms=settings.settle_delay_ms,
        timeout_seconds=settings.render_timeout_seconds,
        keep_page_documents=settings.keep_page_documents,
    )
    scheduler = RenderScheduler(
        splitter=PageSplitterFactory.create(settings),
        renderer=renderer,
        surface_factory=RenderSurfaceFactory.create(settings),
        concurrency=settings.render_concurrency,
        fail_fast=settings.render_fail_fast,
    )
    return Processor(
        steps=[
            RenderPagesStep(scheduler),
            ExtractTextStep(TextExtractorFactory.create(settings)),
            NormalizeTextStep(NormalizerFactory.create(settings)),
        ]
    )
