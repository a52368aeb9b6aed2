"""
Visualization
=============
Height-vs-distance chart of a sampled flight, with launch, apex and
landing marked and the axes scaled from the solved range and max height.
"""

import numpy as np
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from typing import List
import os

from .sampler import as_arrays
from .state import SolvedState, TrajectorySample


# ── Style Configuration ───────────────────────────────────────────────────
STYLE = {
    'bg_color': '#0a0a0a',
    'text_color': '#e0e0e0',
    'grid_color': '#333333',
    'accent_colors': ['#00d4ff', '#ff6b35', '#00e676', '#ffeb3b',
                      '#e040fb', '#ff5252'],
}


def _apply_dark_style(fig, ax):
    """Apply the dark theme to a figure and its single axes."""
    fig.patch.set_facecolor(STYLE['bg_color'])
    ax.set_facecolor(STYLE['bg_color'])
    ax.tick_params(colors=STYLE['text_color'])
    ax.xaxis.label.set_color(STYLE['text_color'])
    ax.yaxis.label.set_color(STYLE['text_color'])
    ax.title.set_color(STYLE['text_color'])
    ax.grid(True, color=STYLE['grid_color'], alpha=0.4, linewidth=0.5)
    for spine in ax.spines.values():
        spine.set_color(STYLE['grid_color'])


def ensure_output_dir(path: str = 'outputs'):
    os.makedirs(path, exist_ok=True)
    return path


def plot_trajectory(samples: List[TrajectorySample], solved: SolvedState,
                    save_path: str = None, show: bool = False) -> plt.Figure:
    """Height vs horizontal distance for one solved launch."""
    data = as_arrays(samples)

    fig, ax = plt.subplots(figsize=(12, 6))
    _apply_dark_style(fig, ax)

    ax.plot(data['x'], data['y'], color=STYLE['accent_colors'][0],
            linewidth=2.5, label='Trajectory')

    if len(samples):
        ax.plot(0, solved.y0, 'o', color='#00e676', markersize=10,
                label='Launch', zorder=5)
        idx_max = int(np.argmax(data['y']))
        ax.plot(data['x'][idx_max], data['y'][idx_max], '^',
                color='#ffeb3b', markersize=10, label='Apex', zorder=5)
        ax.plot(data['x'][-1], data['y'][-1], 'x', color='#ff5252',
                markersize=12, markeredgewidth=3, label='Landing', zorder=5)

    ax.set_xlabel('Distance (m)', fontsize=12)
    ax.set_ylabel('Height (m)', fontsize=12)
    ax.set_title(f'Projectile Trajectory (u={solved.u:.2f} m/s, '
                 f'θ={solved.theta:.2f}°, y₀={solved.y0:.2f} m)',
                 fontsize=13, fontweight='bold')
    ax.legend(loc='upper right', fontsize=10,
              facecolor='#1a1a1a', edgecolor='#444', labelcolor=STYLE['text_color'])
    ax.set_xlim(0, max(solved.range, 1.0) * 1.05)
    ax.set_ylim(0, max(solved.max_height, 1.0) * 1.15)

    plt.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight',
                    facecolor=STYLE['bg_color'])
    if show:
        plt.show()
    return fig
