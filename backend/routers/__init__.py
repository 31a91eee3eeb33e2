from routers.stats import router as stats_router

__all__ = ["stats_router"]
