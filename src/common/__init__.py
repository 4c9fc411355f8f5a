"""
どこで: `common` パッケージ。
何を: 環境変数パース・型付き設定・ロギング初期化の軽量ユーティリティ。
なぜ: ランナー/CLI から共通に使う基盤を分離し、依存の向きを単純化するため。
"""
