from .classifier import classify
from .ordering import sort_entries
from .listing_service import ListingService, list_directory
from .startup_service import get_initial_directory
from .directory_service import DirectoryService, open_file
from .report_service import ReportService


__all__ = [
    'classify',
    'sort_entries',
    'ListingService',
    'list_directory',
    'get_initial_directory',
    'DirectoryService',
    'open_file',
    'ReportService',
]