import pygame


def bounding_box(x, y, width, height):
    return pygame.Rect(int(x), int(y), int(width), int(height))


def intersects(a, b):
    """Strict AABB overlap; rectangles that only share an edge do not intersect."""
    return bool(pygame.Rect(a).colliderect(pygame.Rect(b)))


def as_tuple(rect):
    return (rect.x, rect.y, rect.width, rect.height)
