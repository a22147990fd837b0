from .form import CharacterSource, FormController, UploadSource, UrlSource
from .preview import ImagePreview

__all__ = ["CharacterSource", "FormController", "ImagePreview", "UploadSource", "UrlSource"]
