from .errors import error_response, StorageUnavailableError
