from arenamatch.services.commentary import (
    CommentaryConfig,
    CommentaryService,
    build_commentary_prompt,
)

__all__ = ["CommentaryConfig", "CommentaryService", "build_commentary_prompt"]
