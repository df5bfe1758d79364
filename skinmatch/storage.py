import threading
from typing import Dict, Iterable, List, Optional, Protocol

from .catalog import SAMPLE_PRODUCTS
from .models import Analysis, AnalysisCreate, Product


class Storage(Protocol):
    """What the service needs from a storage backend."""

    def list_products(self) -> List[Product]: ...

    def get_product(self, product_id: int) -> Optional[Product]: ...

    def get_analysis(self, analysis_id: int) -> Optional[Analysis]: ...

    def create_analysis(self, data: AnalysisCreate) -> Analysis: ...

    def list_analyses(self) -> List[Analysis]: ...


class MemStorage:
    def __init__(self, products: Iterable[Dict] = SAMPLE_PRODUCTS):
        # Simple in-memory storage
        self.products: Dict[int, Product] = {}
        self.analyses: Dict[int, Analysis] = {}
        self._next_analysis_id = 1
        self._lock = threading.Lock()
        self._initialize_data(products)

    def _initialize_data(self, products: Iterable[Dict]):
        for index, item in enumerate(products, start=1):
            self.products[index] = Product(**{**item, "id": index, "match_score": None})

    def list_products(self) -> List[Product]:
        """Get every catalog product in seed order."""
        return list(self.products.values())

    def get_product(self, product_id: int) -> Optional[Product]:
        return self.products.get(product_id)

    def get_analysis(self, analysis_id: int) -> Optional[Analysis]:
        return self.analyses.get(analysis_id)

    def create_analysis(self, data: AnalysisCreate) -> Analysis:
        """Store an analysis under the next free id."""
        with self._lock:
            analysis_id = self._next_analysis_id
            self._next_analysis_id += 1
            analysis = Analysis(**dict(data), id=analysis_id)
            self.analyses[analysis_id] = analysis
        return analysis

    def list_analyses(self) -> List[Analysis]:
        return list(self.analyses.values())
