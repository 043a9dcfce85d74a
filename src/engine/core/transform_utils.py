"""
どこで: `engine.core` のベクトルユーティリティ。
何を: `Vec3` タプルに対する差分/外積/正規化などの小さな純関数群。
なぜ: シーン配置や look-rotation の計算を numpy 配列化せずに読みやすく書くため。
"""

from __future__ import annotations

import math

from common.types import Vec3

EPSILON = 1e-9


def add(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def sub(a: Vec3, b: Vec3) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def scale(a: Vec3, k: float) -> Vec3:
    return (a[0] * k, a[1] * k, a[2] * k)


def dot(a: Vec3, b: Vec3) -> float:
    return a[0] * b[0] + a[1] * b[1] + a[2] * b[2]


def cross(a: Vec3, b: Vec3) -> Vec3:
    """右手系の外積 `a × b`。"""
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def length(a: Vec3) -> float:
    return math.sqrt(dot(a, a))


def normalize(a: Vec3) -> Vec3:
    """単位ベクトル化する。

    例外:
        ValueError: 長さがほぼ 0 のベクトル（方向が定まらない）。
    """
    n = length(a)
    if n < EPSILON:
        raise ValueError(f"長さ 0 のベクトルは正規化できません: {a!r}")
    return (a[0] / n, a[1] / n, a[2] / n)


__all__ = ["EPSILON", "add", "sub", "scale", "dot", "cross", "length", "normalize"]
