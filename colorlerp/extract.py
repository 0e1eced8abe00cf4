"""Pick base colors out of a photo."""

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from colorlerp.color_utils import rgb_to_hex


def dominant_colors(image: Image.Image, n_colors: int = 5, random_state: int = 42) -> list[tuple[str, float]]:
    """Return [(hex, percent of pixels), ...], most common first."""
    if n_colors < 1:
        raise ValueError("n_colors must be at least 1.")

    # Resize for speed
    img_small = image.convert("RGB")
    img_small.thumbnail((200, 200))
    pixels = np.array(img_small).reshape(-1, 3)
    n_clusters = min(n_colors, len(np.unique(pixels, axis=0)))

    kmeans = KMeans(n_clusters=n_clusters, n_init=10, random_state=random_state)
    kmeans.fit(pixels)

    # Sort clusters by frequency
    labels, counts = np.unique(kmeans.labels_, return_counts=True)
    sorted_idx = np.argsort(-counts)
    centers = kmeans.cluster_centers_[labels[sorted_idx]].round().astype(int)
    sorted_counts = counts[sorted_idx]
    total = sorted_counts.sum()

    return [
        (rgb_to_hex(int(c[0]), int(c[1]), int(c[2])), float(count / total * 100))
        for c, count in zip(centers, sorted_counts)
    ]
