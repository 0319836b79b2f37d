"""
Build a mesh, spin it for a number of frames and report the result.
"""

import argparse
import logging

import numpy as np

from icomesh import config
from icomesh.core.scene import SpinningScene
from icomesh.logging_config import setup_logging
from icomesh.utils.polyhedra import SHAPES


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Generate a polyhedron mesh and run its spin animation"
    )
    parser.add_argument(
        "--shape",
        type=str,
        default=config.DEFAULT_SHAPE,
        choices=sorted(SHAPES),
        help="Base shape to build",
    )
    parser.add_argument(
        "--quality",
        type=int,
        default=config.DEFAULT_QUALITY,
        help="Subdivision depth (icosphere only)",
    )
    parser.add_argument(
        "--frames", type=int, default=60, help="Number of animation ticks to run"
    )
    parser.add_argument(
        "--frame_ms",
        type=float,
        default=1000.0 / 60.0,
        help="Milliseconds between ticks",
    )
    parser.add_argument(
        "--aspect", type=float, default=config.DEFAULT_ASPECT, help="Viewport aspect"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    parser.add_argument(
        "--log_file", type=str, default=None, help="Optional log file path"
    )
    return parser, parser.parse_args(argv)


def main(argv=None):
    parser, args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    if args.frames < 0:
        parser.error("--frames must be non-negative")

    try:
        scene = SpinningScene(
            shape=args.shape, quality=args.quality, aspect=args.aspect
        )
    except (TypeError, ValueError) as e:
        parser.error(str(e))

    frame = scene.frame()
    for i in range(1, args.frames + 1):
        frame = scene.tick(i * args.frame_ms)

    mesh = scene.mesh
    print(f"Shape: {scene.shape} (quality {scene.quality})")
    print(f"Vertices: {mesh.num_verts()}")
    print(f"Triangles: {mesh.num_faces()}")
    print(f"Edges: {len(mesh.edges())}")
    print(f"Index buffer: {frame['indices'].dtype} x {frame['indices'].size}")
    print(f"Model matrix after {args.frames} frames:")
    print(np.array2string(frame["mov_matrix"].reshape(4, 4).T, precision=4))
    return scene


if __name__ == "__main__":
    main()
