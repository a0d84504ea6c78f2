"""Prompt Templates — Arabic instruction text for every document operation.

Invariants:
    - Templates are pure data; render() is the only computation
    - Document text is truncated to the operation's limit before insertion
    - Translation prompts are never truncated

Design Decisions:
    - str.format placeholders over f-strings: templates stay module constants, testable in isolation
    - Limits tuned per operation: short excerpts suffice for titles/descriptions/categories
"""

FULL_DOCUMENT_LIMIT = 100_000
EXCERPT_LIMIT = 8_000
FIRST_PAGE_LIMIT = 4_000


def render(template: str, content: str = "", limit: int | None = None, **fields) -> str:
    """Insert (optionally truncated) content and extra fields into a template."""
    if limit is not None:
        content = content[:limit]
    return template.format(content=content, **fields)


ANALYSIS = """
قم بتحليل النص التالي بعناية وقدم ملخصًا شاملاً. يجب أن يحدد الملخص النقاط الرئيسية والحجج والأفكار الأساسية المقدمة في المستند.

يرجى تنظيم إجابتك على النحو التالي:
1.  **ملخص موجز:** فقرة قصيرة تلخص الغرض العام والمحتوى للمستند.
2.  **النقاط الرئيسية:** قائمة نقطية (bullet points) لأهم 3-5 نقاط أو نتائج من النص.
3.  **الاستنتاج:** استنتاج نهائي أو الفكرة الرئيسية التي يمكن استخلاصها من المستند.

تأكد من أن التحليل واضح وموجز وسهل الفهم.
---
محتوى المستند:
{content}
---
"""

CATEGORIES = """
بناءً على النص التالي، اقترح من 2 إلى 4 تصنيفات ذات صلة. يجب أن يكون كل تصنيف كلمة أو كلمتين فقط.
مثال على التصنيفات: "فقه", "عقيدة", "تاريخ إسلامي", "سيرة نبوية", "تطوير ذات".
---
محتوى المستند:
{content}
---
"""

SUMMARY = """
مهمتك هي إنشاء ملخص مفصل للنص التالي. اتبع التعليمات بدقة:
1.  اقرأ النص بالكامل.
2.  قم بالمرور على كل فقرة من فقرات النص بشكل منفصل.
3.  لكل فقرة، اكتب ملخصًا مفصلاً يشرح فكرتها الرئيسية والتفاصيل الهامة.
4.  يجب أن يكون الناتج النهائي عبارة عن مجموعة من هذه الملخصات المفصلة، واحدة لكل فقرة.
5.  الهدف هو أن يكون الطول الإجمالي للملخص الناتج كبيرًا، أي ما يقارب نصف طول النص الأصلي. حافظ على وضوح اللغة وسهولة القراءة.

---
محتوى المستند:
{content}
---
"""

QUIZ = """
بناءً على النص التالي، قم بإنشاء اختبار من {question_count} أسئلة من نوع الاختيار من متعدد. يجب أن يحتوي كل سؤال على 4 خيارات.
---
محتوى المستند:
{content}
---
"""

SENTIMENT = """
حلل المشاعر في النص التالي. حدد ما إذا كانت المشاعر العامة "إيجابية" أو "سلبية" أو "محايدة". قدم شرحًا موجزًا لتقييمك.
---
محتوى المستند:
{content}
---
"""

KEYWORDS = """
استنادًا إلى النص التالي، قم باستخراج أهم 5 إلى 10 كلمات رئيسية أو عبارات أساسية تمثل الموضوعات الرئيسية.
---
محتوى المستند:
{content}
---
"""

TO_ENGLISH = (
    "Translate the following Arabic text to English. Maintain the original "
    "formatting (markdown headers, lists, bold text, etc.).\n\n---\n\n{content}"
)

TO_ARABIC = (
    "Translate the following English text to Arabic. Maintain the original "
    "formatting (markdown headers, lists, bold text, etc.).\n\n---\n\n{content}"
)

BOOK_DESCRIPTION = """
بناءً على مقتطف النص التالي من كتاب، قم بإنشاء وصف جذاب وموجز للكتاب يتكون من حوالي 40 كلمة.
يجب أن يكون الوصف مناسبًا للعرض في قائمة مكتبة لجذب القارئ.
---
محتوى المستند:
{content}
---
"""

VIDEO_DESCRIPTION = """
بناءً على عنوان الفيديو التالي، قم بإنشاء وصف جذاب وموجز للفيديو يتكون من حوالي 30-40 كلمة.
يجب أن يكون الوصف مناسبًا للعرض في مكتبة وسائط لجذب المشاهد.
---
عنوان الفيديو:
"{title}"
---
"""

BOOK_TITLE = """
مهمتك هي التصرف كقارئ ذكي يحلل الصفحة الأولى من كتاب. النص التالي هو بداية مستند تم رفعه. ابحث عن العنوان الرئيسي والبارز في هذا النص، كما لو كان مطبوعًا على غلاف الكتاب.

أريد العنوان فقط، بدون أي كلمات إضافية مثل "العنوان هو:". يجب أن يكون الجواب هو العنوان الصريح.

إذا لم تتمكن من تحديد عنوان واضح، أجب بـ "عنوان غير معروف".
---
مقتطف من الصفحة الأولى:
{content}
---
"""

VIDEO_SCRIPT = """
مهمتك هي العمل ككاتب سيناريو خبير. بناءً على عنوان الفيديو ووصفه، قم بإنشاء نص تفصيلي (script) للفيديو.
يجب أن يكون النص منسقًا بشكل جيد، ويتضمن حوارًا أو حديثًا واضحًا، ويمكن أن يتضمن إشارات للمشاهد المرئية إن أمكن.
اجعل النص يبدو طبيعيًا كما لو كان تفريغًا صوتيًا حقيقيًا للفيديو.

عنوان الفيديو: "{title}"

وصف الفيديو: "{description}"

---
النص المقترح:
"""

SUGGESTIONS = """
Based on the following Arabic text, provide 5 general, single-word search keywords in Arabic that represent the main themes.
These keywords should be broad enough to find matches in a library of books and videos.
Avoid very specific phrases or sentences. Return only a JSON array of single-word strings.
Example: ["الفقه", "العقيدة", "السنة", "العبادات"]
---
النص:
{content}
---
"""

ARTICLE = """
مهمتك هي العمل ككاتب محتوى محترف. قم بتحويل النص التالي إلى مقال جذاب ومناسب للنشر في مدونة شخصية.

التعليمات:
1.  ابدأ بعنوان جذاب يلخص الفكرة الرئيسية. استخدم تنسيق Markdown للعنوان (مثال: # عنوان المقال).
2.  قسم المحتوى إلى فقرات قصيرة وسهلة القراءة.
3.  استخدم عناوين فرعية (مثال: ## عنوان فرعي) لتنظيم المقال إذا كان المحتوى طويلاً.
4.  حافظ على جوهر وأفكار النص الأصلي، لكن أعد صياغته بأسلوب شيق ومناسب لجمهور عام.
5.  في نهاية المقال **بالضبط**، وبدون أي نص إضافي بعدها، أضف السطر التالي: "صمم بواسطة الكُتُبي الذكي لأكاديمية درسني".

---
محتوى المستند الأصلي:
{content}
---
"""

RATING = """
مهمتك هي العمل كناقد أدبي خبير. قم بتقييم النص العربي التالي.
قدم تقييمًا من 1 إلى 5 نجوم ومراجعة موجزة ومنطقية باللغة العربية تبرر تقييمك.
خذ في الاعتبار جوانب مثل الوضوح، والبنية، والعمق، والجودة الشاملة.

---
النص للتقييم:
{content}
---
"""
