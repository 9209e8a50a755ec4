from __future__ import annotations


class SiteGenError(Exception):
    stage = "building site"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"Error {self.stage}: {self.detail}"


class CatalogReadError(SiteGenError):
    stage = "reading catalog"


class CatalogParseError(SiteGenError):
    stage = "parsing catalog"


class DuplicateEntryError(CatalogParseError):
    pass


class TemplateError(SiteGenError):
    stage = "loading template"


class OutputDirError(SiteGenError):
    stage = "creating output directory"


class RenderWriteError(SiteGenError):
    stage = "writing output"
