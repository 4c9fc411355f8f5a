"""
どこで: `engine.render` サブパッケージ。
何を: 保持型キャンバスへの線分描画（CanvasRenderer/LineMesh/Shader）を提供。
なぜ: アニメーション中核と GPU リソース管理を分離するため。
"""
