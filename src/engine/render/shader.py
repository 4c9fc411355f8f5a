"""
どこで: `engine.render.shader`。
何を: 太線描画用の GLSL（頂点/ジオメトリ/フラグメント）と ModernGL プログラム生成。
なぜ: コアプロファイルでは `glLineWidth` が 1px に制限されるため、線分をジオメトリシェーダで四角形へ展開する。
"""

from __future__ import annotations

from typing import Any

VERTEX_SHADER = """
#version 330
in vec2 in_vert;
uniform mat4 projection;

void main() {
    gl_Position = projection * vec4(in_vert, 0.0, 1.0);
}
"""

# line_thickness / viewport はともに論理ピクセル単位
GEOMETRY_SHADER = """
#version 330
layout(lines) in;
layout(triangle_strip, max_vertices = 4) out;

uniform float line_thickness;
uniform vec2 viewport;

void main() {
    vec2 p0 = gl_in[0].gl_Position.xy;
    vec2 p1 = gl_in[1].gl_Position.xy;

    // 画素空間で法線を取り、NDC に戻して半幅ぶんずらす
    vec2 dir = (p1 - p0) * viewport * 0.5;
    float len = length(dir);
    if (len < 1e-6) {
        return;
    }
    dir /= len;
    vec2 normal = vec2(-dir.y, dir.x);
    vec2 offset = normal * line_thickness / viewport;

    gl_Position = vec4(p0 + offset, 0.0, 1.0);
    EmitVertex();
    gl_Position = vec4(p0 - offset, 0.0, 1.0);
    EmitVertex();
    gl_Position = vec4(p1 + offset, 0.0, 1.0);
    EmitVertex();
    gl_Position = vec4(p1 - offset, 0.0, 1.0);
    EmitVertex();
    EndPrimitive();
}
"""

FRAGMENT_SHADER = """
#version 330
uniform vec4 color;
out vec4 frag_color;

void main() {
    frag_color = color;
}
"""


class Shader:
    @staticmethod
    def create_shader(ctx: Any) -> Any:
        """線分描画用のプログラムを生成する（uniform: projection/line_thickness/viewport/color）。"""
        return ctx.program(
            vertex_shader=VERTEX_SHADER,
            geometry_shader=GEOMETRY_SHADER,
            fragment_shader=FRAGMENT_SHADER,
        )


__all__ = ["Shader", "VERTEX_SHADER", "GEOMETRY_SHADER", "FRAGMENT_SHADER"]
