"""Default Messages — fixed Arabic results returned for empty input (no model call).

Invariants:
    - All strings are pure data
    - Every domain operation that returns text has exactly one empty-input default here
"""

EMPTY_ANALYSIS = "الملف فارغ أو لا يمكن قراءة المحتوى."
EMPTY_SUMMARY = "لا يوجد محتوى لتلخيصه."
EMPTY_SENTIMENT = "لا يوجد محتوى لتحليل المشاعر."
EMPTY_TRANSLATION = "لا يوجد محتوى لترجمته."
EMPTY_BOOK_DESCRIPTION = "لا يمكن إنشاء وصف لمحتوى فارغ."
EMPTY_VIDEO_DESCRIPTION = "وصف غير متوفر."
UNKNOWN_TITLE = "عنوان غير معروف"
EMPTY_SCRIPT = "لا يمكن إنشاء نص من معلومات فارغة."
EMPTY_ARTICLE = "لا يمكن تصميم مقال من محتوى فارغ."
EMPTY_RATING = "لا يوجد محتوى لتقييمه."
