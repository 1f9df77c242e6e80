from google.api_core import exceptions as api_exceptions
from google.auth import exceptions as auth_exceptions

# Failures raised by the client libraries that mean "the query did not work"
QUERY_FAILURES = (api_exceptions.GoogleAPIError, auth_exceptions.GoogleAuthError)
