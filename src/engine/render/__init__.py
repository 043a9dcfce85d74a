"""
どこで: `engine.render` サブパッケージ。
何を: Scene → GPU 転送・描画の入口。Renderer/LineMesh/Shader を提供。
なぜ: 時計の計算（core/clockface）と描画の責務を分離し、GPU リソース管理を局所化するため。
"""
