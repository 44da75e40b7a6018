"""Action vocabulary and well-known request parameter names."""

from __future__ import annotations

from enum import Enum


class Action(str, Enum):
    """Operations understood by the reports service (``ZOHO_ACTION``)."""

    ADDROW = "ADDROW"
    DELETE = "DELETE"
    UPDATE = "UPDATE"
    IMPORT = "IMPORT"
    EXPORT = "EXPORT"
    COPYDATABASE = "COPYDATABASE"
    DELETEDATABASE = "DELETEDATABASE"
    ENABLEDOMAINDB = "ENABLEDOMAINDB"
    DISABLEDOMAINDB = "DISABLEDOMAINDB"
    CREATETABLE = "CREATETABLE"
    AUTOGENREPORTS = "AUTOGENREPORTS"
    CREATESIMILARVIEWS = "CREATESIMILARVIEWS"
    RENAMEVIEW = "RENAMEVIEW"
    COPYREPORTS = "COPYREPORTS"
    COPYFORMULA = "COPYFORMULA"
    ADDCOLUMN = "ADDCOLUMN"
    DELETECOLUMN = "DELETECOLUMN"
    RENAMECOLUMN = "RENAMECOLUMN"
    HIDECOLUMN = "HIDECOLUMN"
    SHOWCOLUMN = "SHOWCOLUMN"
    ADDLOOKUP = "ADDLOOKUP"
    REMOVELOOKUP = "REMOVELOOKUP"
    DATABASEMETADATA = "DATABASEMETADATA"
    GETDATABASENAME = "GETDATABASENAME"
    ISDBEXIST = "ISDBEXIST"
    GETCOPYDBKEY = "GETCOPYDBKEY"
    GETVIEWNAME = "GETVIEWNAME"
    GETINFO = "GETINFO"
    SHARE = "SHARE"
    REMOVESHARE = "REMOVESHARE"
    ADDDBOWNER = "ADDDBOWNER"
    REMOVEDBOWNER = "REMOVEDBOWNER"
    GETSHAREINFO = "GETSHAREINFO"
    GETVIEWURL = "GETVIEWURL"
    GETEMBEDURL = "GETEMBEDURL"
    GETUSERS = "GETUSERS"
    ADDUSER = "ADDUSER"
    REMOVEUSER = "REMOVEUSER"
    ACTIVATEUSER = "ACTIVATEUSER"
    DEACTIVATEUSER = "DEACTIVATEUSER"
    GETUSERPLANDETAILS = "GETUSERPLANDETAILS"

    def __str__(self) -> str:
        return self.value


class ParamKey:
    """Form and query parameter names used by the client."""

    # Query string
    ACTION = "ZOHO_ACTION"
    OUTPUT_FORMAT = "ZOHO_OUTPUT_FORMAT"
    ERROR_FORMAT = "ZOHO_ERROR_FORMAT"
    AUTH_TOKEN = "authtoken"
    API_VERSION = "ZOHO_API_VERSION"

    # Rows and import/export
    CRITERIA = "ZOHO_CRITERIA"
    IMPORT_TYPE = "ZOHO_IMPORT_TYPE"
    AUTO_IDENTIFY = "ZOHO_AUTO_IDENTIFY"
    ON_IMPORT_ERROR = "ZOHO_ON_IMPORT_ERROR"
    CREATE_TABLE = "ZOHO_CREATE_TABLE"
    IMPORT_DATA = "ZOHO_IMPORT_DATA"
    FILE = "ZOHO_FILE"
    SQL_QUERY = "ZOHO_SQLQUERY"

    # Databases
    DATABASE_NAME = "ZOHO_DATABASE_NAME"
    COPY_DB_KEY = "ZOHO_COPY_DB_KEY"
    DB_NAME = "ZOHO_DB_NAME"
    DOMAIN_DB_NAME = "DBNAME"
    DOMAIN_NAME = "DOMAINNAME"
    DB_ID = "DBID"
    METADATA = "ZOHO_METADATA"

    # Views
    TABLE_DESIGN = "ZOHO_TABLE_DESIGN"
    SOURCE = "ZOHO_SOURCE"
    REF_VIEW = "ZOHO_REFVIEW"
    FOLDER_NAME = "ZOHO_FOLDERNAME"
    COPY_CUSTOM_FORMULA = "ISCOPYCUSTOMFORMULA"
    COPY_AGG_FORMULA = "ISCOPYAGGFORMULA"
    VIEW_NAME = "ZOHO_VIEWNAME"
    NEW_VIEW_NAME = "ZOHO_NEW_VIEWNAME"
    NEW_VIEW_DESC = "ZOHO_NEW_VIEWDESC"
    VIEW_TO_COPY = "ZOHO_VIEWTOCOPY"
    FORMULA_TO_COPY = "ZOHO_FORMULATOCOPY"
    OBJ_ID = "OBJID"

    # Columns
    COLUMN_NAME = "ZOHO_COLUMNNAME"
    DATA_TYPE = "ZOHO_DATATYPE"
    OLD_COLUMN_NAME = "OLDCOLUMNNAME"
    NEW_COLUMN_NAME = "NEWCOLUMNNAME"
    REFERRED_TABLE = "ZOHO_REFERREDTABLE"
    REFERRED_COLUMN = "ZOHO_REFERREDCOLUMN"
    IF_ERROR_ON_CONVERSION = "ZOHO_IFERRORONCONVERSION"

    # Sharing and users
    EMAILS = "ZOHO_EMAILS"
    VIEWS = "ZOHO_VIEWS"
