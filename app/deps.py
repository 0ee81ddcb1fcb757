from app.services.depth_chart import DepthChartStore, store


def get_store() -> DepthChartStore:
    """The process-wide depth chart store. Tests override this dependency with a fresh instance."""
    return store
