"""
Phimg 搜图插件 - 源代码包

本包采用 DDD (领域驱动设计) 架构：
- application: 应用层 - 群配置存储、搜图用例与命令编排
- domain: 领域层 - 群配置实体、标签组合与图片选取，平台无关
- infrastructure: 基础设施层 - 配置、KV 持久化、图站客户端、权限解析
- shared: 共享常量
- utils: 日志
"""
