"""
どこで: `engine.render` のシェーダ定義。
何を: 単色ライン描画用の最小 GLSL プログラム（正射影 + 一様色）。
なぜ: 時計のポリラインは太さ可変を必要としないため、LINE_STRIP + primitive restart だけで描く。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
uniform mat4 projection;
in vec3 in_vert;
void main() {
    gl_Position = projection * vec4(in_vert, 1.0);
}
"""

FRAGMENT_SHADER = """
#version 330
uniform vec4 color;
out vec4 f_color;
void main() {
    f_color = color;
}
"""


class Shader:
    @staticmethod
    def create_shader(mgl_context: Any) -> Any:
        """ライン描画用の `moderngl.Program` を生成する。"""
        return mgl_context.program(vertex_shader=VERTEX_SHADER, fragment_shader=FRAGMENT_SHADER)
