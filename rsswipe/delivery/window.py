from typing import Sequence

INITIAL_PAGE_SIZE = 10
PAGE_INCREMENT = 10
BUFFER = 3         # margem de lookahead antes do fim do que já foi liberado
WINDOW_RADIUS = 2  # itens materializados de cada lado da posição atual


class DeliveryWindow:
    """
    Janela de entrega sobre um stream já ordenado de `total` itens.

    loaded_count: quantos itens já foram liberados ao consumidor (só cresce,
    nunca passa de total). current_index: posição de leitura atual. Apenas
    materialized_window() precisa estar renderizado; o resto é só posição.
    """

    def __init__(self, total: int, initial_page_size: int = INITIAL_PAGE_SIZE,
                 page_increment: int = PAGE_INCREMENT, buffer: int = BUFFER,
                 window_radius: int = WINDOW_RADIUS):
        if total < 0:
            raise ValueError("total must be >= 0")
        self.total = total
        self.page_increment = page_increment
        self.buffer = buffer
        self.window_radius = window_radius
        self.loaded_count = min(initial_page_size, total)
        self.current_index = 0

    def advance(self, new_index: int) -> bool:
        """Atualiza a posição; retorna True se mais itens foram liberados."""
        self.current_index = max(0, new_index)
        if self.current_index >= self.loaded_count - self.buffer and self.loaded_count < self.total:
            self.loaded_count = min(self.loaded_count + self.page_increment, self.total)
            return True
        return False

    def extend_total(self, total: int) -> None:
        # o stream só cresce; loaded_count fica como está
        if total > self.total:
            self.total = total

    def materialized_window(self) -> range:
        start = max(0, self.current_index - self.window_radius)
        stop = min(self.loaded_count, self.current_index + self.window_radius + 1)
        return range(start, max(start, stop))

    def materialize(self, items: Sequence) -> list:
        window = self.materialized_window()
        return list(items[window.start:window.stop])
