from __future__ import annotations

from collections.abc import Sequence

from tagged_context.application.context import with_tagged_context
from tagged_context.domain.failures import ForeignMessagePolicy
from tagged_context.domain.result import Err, Ok, attempt
from tagged_context.errors import TaggedErrorWithContext, tagged_error

DIAGRAM_URL = "https://example.com/images/diagram.webp"
DEFAULT_URLS = (
    "https://example.com/guide/introduction",
    "https://example.com/guide/getting-started",
    "https://example.com/guide/advanced",
)


class APIError(tagged_error("APIError")):
    pass


class ImageProcessingError(tagged_error("ImageProcessingError")):
    pass


class ContentError(tagged_error("ContentError")):
    pass


class CrawlError(tagged_error("CrawlError")):
    pass


class Crawler:
    """Toy crawl pipeline whose image API always rejects the image."""

    def __init__(
        self,
        *,
        native: bool = False,
        foreign_message: ForeignMessagePolicy = ForeignMessagePolicy.ORIGINAL,
    ) -> None:
        self.native = native
        self.foreign_message = foreign_message

    def call_image_api(self, image_url: str) -> str:
        if self.native:
            raise ValueError(f"Image API rejected {image_url}")
        raise APIError("Unsupported image format: WEBP")

    def generate_image_alt_text(self, image_url: str) -> str:
        with with_tagged_context(
            ImageProcessingError,
            lambda: f"Failed to generate accessibility text for image: {image_url}",
            foreign_message=self.foreign_message,
        ):
            return self.call_image_api(image_url)

    def process_page_content(self, url: str) -> str:
        with with_tagged_context(
            ContentError,
            lambda: f"Error processing content for URL: {url}",
            foreign_message=self.foreign_message,
        ):
            return self.generate_image_alt_text(DIAGRAM_URL)

    def crawl(self, urls: Sequence[str]) -> Ok[str] | Err[TaggedErrorWithContext]:
        if not urls:
            return Ok("Nothing to crawl")
        result = attempt(self.process_page_content, urls[0])
        return with_tagged_context(
            CrawlError,
            lambda: f"Failed to complete web crawl for {len(urls)} URLs",
            foreign_message=self.foreign_message,
        )(result)
