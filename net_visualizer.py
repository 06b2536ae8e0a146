import logging
import math
from typing import Dict, List, Optional, Union

import pygame

from net_topology import Link, Node, default_font

logger = logging.getLogger(__name__)

# --- Параметры окна ---
SCREEN_WIDTH, SCREEN_HEIGHT = 800, 600
BACKGROUND_COLOR = (255, 255, 255)
FPS = 60

# --- Демонстрационные данные ---
DEMO_HOSTS = 6

Entity = Union[Node, Link]


class Topology:
    """
    Коллекция узлов и рёбер. Id рёбер плотные: links[i].id == i,
    поэтому после удаления ребра нумерация сдвигается.
    """

    def __init__(self):
        self.nodes: Dict[int, Node] = {}
        self.links: List[Link] = []
        self._next_node_id = 0

    def add_node(self, x: float, y: float, region=0, h_power: float = 0.0) -> Node:
        node = Node(self._next_node_id, x, y, region=region, h_power=h_power)
        self.nodes[node.id] = node
        self._next_node_id += 1
        return node

    def connect(self, from_id: int, to_id: int) -> Link:
        link = Link(len(self.links), self.nodes[from_id], self.nodes[to_id])
        self.links.append(link)
        link.from_node.add_link(link.id)
        link.to_node.add_link(link.id)
        return link

    def remove_link(self, link_id):
        if not 0 <= link_id < len(self.links):
            return False
        link = self.links.pop(link_id)
        link.from_node.remove_link(link_id)
        link.to_node.remove_link(link_id)
        for later in self.links[link_id:]:
            later.id -= 1
        for node in self.nodes.values():
            node.renumber_links_after_removal(link_id)
        logger.debug("Removed link %s, %d links left", link_id, len(self.links))
        return True

    def remove_node(self, node_id):
        node = self.nodes.get(node_id)
        if node is None:
            return False
        # с конца, чтобы оставшиеся id не сдвигались
        for link_id in sorted(node.links, reverse=True):
            self.remove_link(link_id)
        del self.nodes[node_id]
        return True

    def node_at(self, x: float, y: float) -> Optional[Node]:
        # последний нарисованный узел лежит сверху
        for node in reversed(list(self.nodes.values())):
            if node.hit_test(x, y):
                return node
        return None

    def link_at(self, x: float, y: float) -> Optional[Link]:
        for link in reversed(self.links):
            if link.hit_test(x, y):
                return link
        return None

    def pick(self, x: float, y: float) -> Optional[Entity]:
        node = self.node_at(x, y)
        if node is not None:
            return node
        return self.link_at(x, y)

    def entities(self):
        return list(self.links) + list(self.nodes.values())

    def selected(self):
        return [e for e in self.entities() if e.selected]

    def select_only(self, entity):
        for e in self.entities():
            if e is not entity:
                e.unselect()
        if entity is not None:
            entity.select()

    def remove_selected(self):
        removed = 0
        for link in sorted((l for l in self.links if l.selected), key=lambda l: l.id, reverse=True):
            removed += self.remove_link(link.id)
        for node in [n for n in self.nodes.values() if n.selected]:
            removed += self.remove_node(node.id)
        return removed

    def draw(self, screen: pygame.Surface, font: Optional[pygame.font.Font] = None):
        font = font or default_font()
        # рёбра первыми, чтобы диски узлов перекрывали концы линий
        for link in self.links:
            link.draw(screen)
        for node in self.nodes.values():
            node.draw(screen, font)


def demo_topology(width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT, hosts: int = DEMO_HOSTS) -> Topology:
    """Звезда: роутер в центре, хосты по кругу, у каждой пары соседей свой регион."""
    topology = Topology()
    center_x, center_y = width // 2, height // 2
    router = topology.add_node(center_x, center_y, region=0)

    radius = min(width, height) / 3
    angle_step = 2 * math.pi / hosts if hosts > 0 else 0
    for i in range(hosts):
        angle = i * angle_step
        x = center_x + int(radius * math.cos(angle))
        y = center_y + int(radius * math.sin(angle))
        host = topology.add_node(x, y, region=1 + i // 2)
        topology.connect(router.id, host.id)
    return topology


class TopologyViewer:
    """Окно pygame: выбор кликом, перетаскивание узлов, удаление клавишей Delete."""

    def __init__(self, topology: Topology, screen: pygame.Surface, font: Optional[pygame.font.Font] = None):
        self.topology = topology
        self.screen = screen
        self.font = font
        self.dragging: Optional[Node] = None
        self.running = True

    def handle_event(self, event):
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:  # ЛКМ
            hit = self.topology.pick(*event.pos)
            self.topology.select_only(hit)
            self.dragging = hit if isinstance(hit, Node) else None
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.dragging = None
        elif event.type == pygame.MOUSEMOTION and self.dragging is not None:
            self.dragging.move_to(*event.pos)
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_DELETE, pygame.K_BACKSPACE):
            removed = self.topology.remove_selected()
            if removed:
                print(f"Удалено элементов: {removed}")
            self.dragging = None

    def draw(self):
        self.screen.fill(BACKGROUND_COLOR)
        self.topology.draw(self.screen, self.font)

    def run(self):
        clock = pygame.time.Clock()
        while self.running:
            for event in pygame.event.get():
                self.handle_event(event)
            self.draw()
            pygame.display.flip()
            clock.tick(FPS)


def main():
    print("Запуск визуализации...")
    pygame.init()
    screen = pygame.display.set_mode((SCREEN_WIDTH, SCREEN_HEIGHT))
    pygame.display.set_caption("Топология сети")

    topology = demo_topology()
    print(f"Узлов: {len(topology.nodes)}, рёбер: {len(topology.links)}")

    TopologyViewer(topology, screen, default_font()).run()

    pygame.quit()
    print("Визуализатор закрыт.")


if __name__ == '__main__':
    main()
