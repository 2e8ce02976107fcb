"""
どこで: `common` パッケージ。
何を: ロギング初期化・環境変数パース・型付き設定などの共通基盤。
なぜ: ドメイン層（`colorscale`）と CLI の双方から再利用するため。
"""
