"""Action groups exposed on `ReportClient`."""
from .columns import ColumnsResource
from .data import DataResource
from .databases import DatabasesResource
from .sharing import SharingResource
from .users import UsersResource
from .views import ViewsResource

__all__ = [
    "ColumnsResource",
    "DataResource",
    "DatabasesResource",
    "SharingResource",
    "UsersResource",
    "ViewsResource",
]
