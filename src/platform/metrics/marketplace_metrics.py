from prometheus_client import Counter, Histogram


class MarketplaceMetrics:
    """
    Marketplace Service Core Metrics Collector

    Counts account activity and catalogue writes, and times the read paths that build
    dynamic queries (listing and search).
    """

    def __init__(self):
        # ========== Account Metrics ==========
        self.user_registrations = Counter(
            'marketplace_user_registrations_total',
            'Total successful user registrations',
        )

        self.user_logins = Counter(
            'marketplace_user_logins_total',
            'Login attempts',
            ['result'],  # result: success/failure
        )

        # ========== Catalogue Metrics ==========
        self.product_writes = Counter(
            'marketplace_product_writes_total',
            'Product writes',
            ['operation'],  # operation: create/update/delete
        )

        self.review_writes = Counter(
            'marketplace_review_writes_total',
            'Review writes',
            ['operation'],  # operation: create/update/delete
        )

        self.sellers_opened = Counter(
            'marketplace_sellers_opened_total',
            'Seller profiles created on first listing',
        )

        # ========== Read Path Metrics ==========
        self.query_duration = Histogram(
            'marketplace_query_duration_seconds',
            'Listing and search query duration',
            ['query'],  # query: list_products/search
            buckets=[0.005, 0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5],
        )

    # ========== Helper Methods ==========

    def record_login(self, *, success: bool):
        self.user_logins.labels(result='success' if success else 'failure').inc()

    def record_product_write(self, *, operation: str):
        self.product_writes.labels(operation=operation).inc()

    def record_review_write(self, *, operation: str):
        self.review_writes.labels(operation=operation).inc()

    def record_query(self, *, query: str, duration: float):
        self.query_duration.labels(query=query).observe(duration)


# Global metrics instance
metrics = MarketplaceMetrics()
