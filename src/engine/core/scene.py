"""
どこで: `engine.core` のシーングラフ。
何を: prefab（`Geometry`）を姿勢付きで配置する `SceneNode` と、その木を管理する `Scene`。
なぜ: 描画 API に依存せず「生成・配置・回転・破棄」を表し、Renderer はワールド形状だけを読めば済むようにするため。

設計:
- `instantiate(prefab, position, rotation, parent)` の位置/回転はワールド座標で指定する。
  `parent` はグループ化（アンカー）と破棄の単位であり、親の姿勢は子に合成しない。
- ノードのワールド形状は「prefab を回転 → position へ平行移動」。
- 変更は `position`/`rotation` の代入のみ。prefab 自体は共有・不変。
"""

from __future__ import annotations

import logging
from typing import Iterator

from common import settings
from common.types import Vec3, as_vec3

from .geometry import Geometry
from .quaternion import Quaternion

logger = logging.getLogger(__name__)


class SceneNode:
    """シーン上の 1 オブジェクト（prefab を持たないノードはアンカーとして振る舞う）。"""

    __slots__ = ("name", "prefab", "position", "rotation", "parent", "children", "_alive")

    def __init__(
        self,
        name: str,
        prefab: Geometry | None = None,
        position: Vec3 = (0.0, 0.0, 0.0),
        rotation: Quaternion | None = None,
        parent: "SceneNode | None" = None,
    ) -> None:
        self.name = name
        self.prefab = prefab
        self.position: Vec3 = as_vec3(position)
        self.rotation: Quaternion = rotation if rotation is not None else Quaternion.identity()
        self.parent = parent
        self.children: list[SceneNode] = []
        self._alive = True

    @property
    def is_anchor(self) -> bool:
        return self.prefab is None

    @property
    def alive(self) -> bool:
        return self._alive

    def iter_subtree(self) -> Iterator["SceneNode"]:
        """自身を含む部分木を深さ優先（前順）で返す。"""
        yield self
        for child in self.children:
            yield from child.iter_subtree()

    def world_geometry(self) -> Geometry:
        """prefab を現在の姿勢でワールドへ配置した形状（アンカーは空）。"""
        if self.prefab is None:
            return Geometry.empty()
        return self.prefab.transform(self.rotation.to_matrix(), self.position)

    def __repr__(self) -> str:  # pragma: no cover - 表示用
        kind = "anchor" if self.is_anchor else "object"
        return f"SceneNode({self.name!r}, {kind}, pos={self.position})"


class Scene:
    """ノード木の所有者。ルートは名前 `"root"` のアンカー。"""

    def __init__(self) -> None:
        self.root = SceneNode("root")
        self._debug = settings.get().DEBUG_SCENE

    def _attach(self, node: SceneNode, parent: SceneNode | None) -> SceneNode:
        target = parent if parent is not None else self.root
        if not target.alive:
            raise ValueError(f"破棄済みノードには追加できません: {target.name!r}")
        node.parent = target
        target.children.append(node)
        if self._debug:
            logger.debug("instantiate %s under %s at %s", node.name, target.name, node.position)
        return node

    def create_anchor(
        self,
        name: str,
        position: Vec3 = (0.0, 0.0, 0.0),
        parent: SceneNode | None = None,
    ) -> SceneNode:
        """prefab を持たない親コンテナを作成する。"""
        return self._attach(SceneNode(name, None, position), parent)

    def instantiate(
        self,
        prefab: Geometry,
        position: Vec3 = (0.0, 0.0, 0.0),
        rotation: Quaternion | None = None,
        parent: SceneNode | None = None,
        *,
        name: str | None = None,
    ) -> SceneNode:
        """prefab を指定姿勢で生成して木に登録する。

        例外:
            TypeError: prefab が `Geometry` でない場合。
        """
        if not isinstance(prefab, Geometry):
            raise TypeError(f"prefab は Geometry である必要があります: got {type(prefab)!r}")
        node = SceneNode(name or "object", prefab, position, rotation)
        return self._attach(node, parent)

    def destroy(self, node: SceneNode) -> None:
        """ノードを部分木ごと取り除く（二重破棄は no-op）。"""
        if node is self.root:
            raise ValueError("root は破棄できません（clear() を使用）")
        if not node.alive:
            return
        if node.parent is not None and node in node.parent.children:
            node.parent.children.remove(node)
        for n in node.iter_subtree():
            n._alive = False
        node.parent = None

    def clear(self) -> None:
        """root 以外の全ノードを破棄する。"""
        for child in list(self.root.children):
            self.destroy(child)

    def iter_nodes(self) -> Iterator[SceneNode]:
        """root を除く全ノード。"""
        for child in self.root.children:
            yield from child.iter_subtree()

    def find(self, name: str) -> SceneNode | None:
        for node in self.iter_nodes():
            if node.name == name:
                return node
        return None

    def __len__(self) -> int:
        return sum(1 for _ in self.iter_nodes())

    def to_geometry(self) -> Geometry:
        """全ノードのワールド形状を 1 つの `Geometry` に結合する（Renderer 用）。"""
        return Geometry.concat_all(n.world_geometry() for n in self.iter_nodes())


__all__ = ["SceneNode", "Scene"]
