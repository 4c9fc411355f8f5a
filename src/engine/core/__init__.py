"""
どこで: `engine.core` サブパッケージ。
何を: 描画面インターフェース・フレーム駆動（Tickable/FrameClock）・描画ウィンドウを提供。
なぜ: アニメーション中核（stripes）とホスト（pyglet/GL）の境界をここに置くため。
"""
