"""Catalogue bounded context: product data and the browse pipeline.

Products arrive from the Catalog Service as immutable value objects. The
browse pipeline derives the displayed list from a snapshot plus the
shopper's current filter selection.
"""

from protean.domain import Domain

from catalogue.utils.logging import configure_logging

# Console plus logs/storefront.log; LOG_DIR and LOG_LEVEL override
configure_logging(log_dir="logs", log_file_prefix="storefront")

catalogue = Domain(name="catalogue")
