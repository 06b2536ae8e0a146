import logging
from typing import Iterable, List, Optional, Tuple

import pygame

from net_colors import rgba_for_region
from net_geometry import Point, dist2, distance_to_segment

logger = logging.getLogger(__name__)

# --- Параметры отрисовки и попадания ---
# Один и тот же радиус используется и для рисования, и для hit-test.
NODE_RADIUS = 25
NODE_OUTLINE = 2
NODE_ALPHA = 0.7
LINK_HIT_THRESHOLD = 3

OUTLINE_COLOR = (0, 0, 0)
LINK_COLOR = (0, 0, 0)
LABEL_COLOR = (0, 0, 0)
SELECTED_COLOR = (255, 255, 0)

LINK_WIDTH = 1
SELECTED_LINK_WIDTH = 3
SELECTED_RING = 8
LABEL_FONT_SIZE = 24


def default_font():
    # не кэшируется: после pygame.font.quit() старый Font недействителен
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(None, LABEL_FONT_SIZE)


class Link:
    """Ребро топологии: отрезок между двумя узлами."""

    def __init__(self, id: int, from_node: "Node", to_node: "Node", threshold: float = LINK_HIT_THRESHOLD):
        if from_node is None or to_node is None:
            raise ValueError(f"Link {id}: both endpoints are required")
        self.id = id
        self.from_node = from_node
        self.to_node = to_node
        self.threshold = threshold
        self.selected = False

    def __repr__(self):
        return f"Link(id={self.id}, {self.from_node.id}->{self.to_node.id})"

    def endpoints(self) -> Tuple[Point, Point]:
        return self.from_node.position, self.to_node.position

    def draw(self, screen):
        start, end = self.endpoints()
        width = SELECTED_LINK_WIDTH if self.selected else LINK_WIDTH
        pygame.draw.line(screen, LINK_COLOR, start, end, width)

    def is_incident_to(self, node_id):
        return self.from_node.id == node_id or self.to_node.id == node_id

    def select(self):
        self.selected = True

    def unselect(self):
        self.selected = False

    def hit_test(self, x, y):
        start, end = self.endpoints()
        return distance_to_segment((x, y), start, end) < self.threshold


class Node:
    """
    Вершина топологии (хост).

    links хранит только id рёбер, а не объекты Link: сами рёбра
    живут в коллекции хоста и разрешаются по индексу.
    """

    def __init__(self, id: int, x: float, y: float, links: Optional[Iterable[int]] = None,
                 region=0, h_power: float = 0.0, radius: float = NODE_RADIUS):
        self.id = id
        self.x = x
        self.y = y
        self.links: List[int] = []
        for link_id in links or ():
            self.add_link(link_id)
        self.region = region
        self.h_power = h_power
        self.radius = radius
        self.selected = False

    def __repr__(self):
        return f"Node(id={self.id}, x={self.x}, y={self.y}, links={self.links})"

    @property
    def position(self) -> Point:
        return self.x, self.y

    def move_to(self, x, y):
        self.x, self.y = x, y

    def draw(self, screen: pygame.Surface, font: Optional[pygame.font.Font] = None):
        pos = (int(self.x), int(self.y))
        radius = int(self.radius)

        # 1. Чёрный ободок
        pygame.draw.circle(screen, OUTLINE_COLOR, pos, radius + NODE_OUTLINE)

        # 2. Полупрозрачная заливка цветом региона
        fill = pygame.Surface((radius * 2 + 1, radius * 2 + 1), pygame.SRCALPHA)
        pygame.draw.circle(fill, rgba_for_region(self.region, NODE_ALPHA), (radius, radius), radius)
        screen.blit(fill, (pos[0] - radius, pos[1] - radius))

        # 3. Номер узла
        font = font or default_font()
        text_surface = font.render(str(self.id), True, LABEL_COLOR)
        screen.blit(text_surface, text_surface.get_rect(center=pos))

        if self.selected:
            pygame.draw.circle(screen, SELECTED_COLOR, pos, radius + SELECTED_RING, 2)

    def select(self):
        self.selected = True

    def unselect(self):
        self.selected = False

    def add_link(self, link_id):
        if link_id in self.links:
            logger.debug("Node %s: link %s already attached", self.id, link_id)
            return False
        self.links.append(link_id)
        return True

    def remove_link(self, link_id):
        try:
            self.links.remove(link_id)
        except ValueError:
            return False
        return True

    def renumber_links_after_removal(self, removed_id):
        """Сдвигает id рёбер после удаления ребра removed_id из плотной нумерации."""
        self.links = [link_id - 1 if link_id > removed_id else link_id for link_id in self.links]

    def hit_test(self, x, y):
        return dist2((x, y), self.position) < self.radius * self.radius
