"""Marketplace access and catalog use cases"""
from .account_directory import AccountDirectory
from .subscription_ledger import SubscriptionLedger
from .eligibility_evaluator import EligibilityEvaluator
from .catalog_guard import CatalogGuard
from .create_listing import CreateListing
from .update_listing import UpdateListing, AdminUpdateListing
from .delete_listing import DeleteListing, AdminDeleteListing
from .search_listings import GetListing, SearchListings
from .manage_categories import ListCategories, AddCategory, RenameCategory, DeleteCategory
from .audit_ledger import AuditSubscriptionLedger
from .dtos import (
    RegisterAccountCommandDTO,
    AccountResponseDTO,
    StartSubscriptionRequestDTO,
    SubscriptionPeriodResponseDTO,
    SubscriptionStatusResponseDTO,
    EligibilityResponseDTO,
    CreateListingCommandDTO,
    UpdateListingCommandDTO,
    ListingSearchQueryDTO,
    ListingResponseDTO,
    CategoryCommandDTO,
    CategoryResponseDTO,
    LedgerFindingDTO,
    LedgerAuditResultDTO,
)

__all__ = [
    "AccountDirectory",
    "SubscriptionLedger",
    "EligibilityEvaluator",
    "CatalogGuard",
    "CreateListing",
    "UpdateListing",
    "AdminUpdateListing",
    "DeleteListing",
    "AdminDeleteListing",
    "GetListing",
    "SearchListings",
    "ListCategories",
    "AddCategory",
    "RenameCategory",
    "DeleteCategory",
    "AuditSubscriptionLedger",
    "RegisterAccountCommandDTO",
    "AccountResponseDTO",
    "StartSubscriptionRequestDTO",
    "SubscriptionPeriodResponseDTO",
    "SubscriptionStatusResponseDTO",
    "EligibilityResponseDTO",
    "CreateListingCommandDTO",
    "UpdateListingCommandDTO",
    "ListingSearchQueryDTO",
    "ListingResponseDTO",
    "CategoryCommandDTO",
    "CategoryResponseDTO",
    "LedgerFindingDTO",
    "LedgerAuditResultDTO",
]
