from .interceptors import AuthGateInterceptor, CorrelationIdInterceptor
from .pipeline import RequestPipeline

__all__ = ["AuthGateInterceptor", "CorrelationIdInterceptor", "RequestPipeline"]
