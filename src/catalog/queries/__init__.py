from .products import GetAllProductsQuery, GetProductByIdQuery

__all__ = ["GetAllProductsQuery", "GetProductByIdQuery"]
