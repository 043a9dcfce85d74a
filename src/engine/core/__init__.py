"""
どこで: `engine.core` サブパッケージ。
何を: Geometry・ベクトル/クォータニオン・シーングラフ・フレーム駆動（Tickable/FrameClock）を提供。
なぜ: 描画 API に依存しない計算基盤を構成し、上位層（clockface/render/api）から再利用可能にするため。
"""
