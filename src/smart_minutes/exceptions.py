"""Custom exceptions for the meeting minutes pipeline."""


class PipelineError(Exception):
    """Base class for every failure reported to the caller of a pipeline stage."""

    def __init__(self, message: str, cause: Exception | None = None):
        self.cause = cause
        super().__init__(message)


class InvalidInputError(PipelineError):
    """Raised when a required field is missing or empty."""

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid '{field}': {reason}")


class AuthenticationError(PipelineError):
    """Raised when no user matches the given credentials."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Invalid email or password")


class StorageUploadError(PipelineError):
    """Raised when writing an object to storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        super().__init__(f"Failed to upload '{object_name}' to storage", cause)


class StorageDownloadError(PipelineError):
    """Raised when reading an object (or a link to it) from storage fails."""

    def __init__(self, object_name: str, cause: Exception | None = None):
        self.object_name = object_name
        super().__init__(f"Failed to read '{object_name}' from storage", cause)


class TranscriptionError(PipelineError):
    """Raised when the speech recognition job is rejected, fails or times out."""

    def __init__(self, audio_reference: str, cause: Exception | None = None):
        self.audio_reference = audio_reference
        super().__init__(f"Failed to transcribe audio '{audio_reference}'", cause)


class NoSpeechDetectedError(PipelineError):
    """Raised when minutes are requested for a transcript without any speech."""

    def __init__(self, audio_file_name: str):
        self.audio_file_name = audio_file_name
        super().__init__(f"No speech was detected in '{audio_file_name}'")


class TranscriptNotFoundError(PipelineError):
    """Raised when a user has no stored transcription to summarize."""

    def __init__(self, owner_id: str, transcription_id: str | None = None):
        self.owner_id = owner_id
        self.transcription_id = transcription_id
        target = transcription_id or "latest"
        super().__init__(f"Transcription '{target}' not found for user '{owner_id}'")


class LLMServiceError(PipelineError):
    """Raised when the text generation call fails."""


class CacheServiceError(PipelineError):
    """Raised when cache operations fail."""

    def __init__(self, key: str, operation: str, cause: Exception | None = None):
        self.key = key
        self.operation = operation
        super().__init__(f"Cache {operation} failed for key '{key}'", cause)


class SummarizationError(PipelineError):
    """Raised when a template's summary could not be generated."""

    def __init__(self, template_name: str, cause: Exception | None = None):
        self.template_name = template_name
        super().__init__(f"Failed to summarize with template '{template_name}'", cause)


class DocumentRenderError(PipelineError):
    """Raised when a summary cannot be serialized into a document."""

    def __init__(self, template_name: str, cause: Exception | None = None):
        self.template_name = template_name
        super().__init__(f"Failed to render document for '{template_name}'", cause)


class PublishError(PipelineError):
    """Raised when uploading or sharing a document fails."""

    def __init__(self, file_name: str, cause: Exception | None = None):
        self.file_name = file_name
        super().__init__(f"Failed to publish '{file_name}'", cause)


class PersistenceError(PipelineError):
    """Raised when reading or writing pipeline records in the database fails."""

    def __init__(self, owner_id: str, cause: Exception | None = None):
        self.owner_id = owner_id
        super().__init__(f"Failed to access records for user '{owner_id}'", cause)
