from abc import ABC, abstractmethod
from typing import List

from rsswipe.storage.models import Item

class BaseFeed(ABC):
    @abstractmethod
    def fetch(self) -> List[Item]:
        pass
