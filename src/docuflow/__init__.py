"""DocuFlow client: authenticate and upload a file to a DocuFlow backend."""

__version__ = "0.1.0"
