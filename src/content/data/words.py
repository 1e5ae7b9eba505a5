"""
Local word lists, keyed by theme.

Each entry has word, meaning, hint and an optional confusable word.
"""

from typing import Dict, List


Entry = Dict[str, str]

ZH_IDIOMS: Dict[str, List[Entry]] = {
    "learning": [
        {"word": "学而不厌", "meaning": "学习而不感到满足", "hint": "出自《论语·述而》，孔子形容好学的态度", "confuse": "诲人不倦"},
        {"word": "温故知新", "meaning": "温习旧知识从而得到新的理解", "hint": "出自《论语·为政》"},
        {"word": "举一反三", "meaning": "从一件事情类推而知道许多事情", "hint": "出自《论语·述而》", "confuse": "触类旁通"},
        {"word": "悬梁刺股", "meaning": "形容刻苦学习", "hint": "孙敬悬梁、苏秦刺股的故事"},
        {"word": "凿壁偷光", "meaning": "形容家贫而读书刻苦", "hint": "西汉匡衡借邻居烛光读书的故事", "confuse": "囊萤映雪"},
        {"word": "手不释卷", "meaning": "书本不离手，形容勤奋好学", "hint": "出自《三国志》，吕蒙的故事"},
        {"word": "不耻下问", "meaning": "不以向地位或学识不如自己的人请教为耻", "hint": "出自《论语·公冶长》"},
        {"word": "融会贯通", "meaning": "把各方面的知识和道理融合贯穿起来", "hint": "出自朱熹《朱子语类》"},
        {"word": "博览群书", "meaning": "广泛地阅读各种书籍", "hint": "出自《周书·庾信传》"},
        {"word": "循序渐进", "meaning": "按照一定的步骤逐渐深入或提高", "hint": "出自朱熹《论语集注》", "confuse": "按部就班"},
    ],
    "virtue": [
        {"word": "诚实守信", "meaning": "为人真诚，遵守诺言", "hint": "儒家五常中的“信”"},
        {"word": "一诺千金", "meaning": "许下的诺言价值千金，形容说话算数", "hint": "出自《史记·季布栾布列传》", "confuse": "一言九鼎"},
        {"word": "尊老爱幼", "meaning": "尊敬长辈，爱护晚辈", "hint": "源于《孟子》“老吾老以及人之老”"},
        {"word": "助人为乐", "meaning": "把帮助别人当作快乐", "hint": "中华传统美德"},
        {"word": "见义勇为", "meaning": "看到正义的事情勇敢地去做", "hint": "出自《论语·为政》“见义不为，无勇也”"},
        {"word": "克己奉公", "meaning": "严格要求自己，一心为公", "hint": "出自《后汉书·祭遵传》"},
        {"word": "宽以待人", "meaning": "以宽容的态度对待别人", "hint": "常与“严以律己”连用", "confuse": "严以律己"},
        {"word": "负荆请罪", "meaning": "表示向人认错赔罪", "hint": "廉颇向蔺相如请罪的故事"},
        {"word": "舍己为人", "meaning": "为了别人而牺牲自己的利益", "hint": "出自朱熹《论语集注》"},
        {"word": "光明磊落", "meaning": "胸怀坦白，正大光明", "hint": "出自《朱子语类》"},
    ],
    "growth": [
        {"word": "持之以恒", "meaning": "长久地坚持下去", "hint": "出自曾国藩家书", "confuse": "坚持不懈"},
        {"word": "百折不挠", "meaning": "无论受多少挫折都不退缩", "hint": "出自蔡邕《太尉桥玄碑》"},
        {"word": "自强不息", "meaning": "自觉努力向上，永不懈怠", "hint": "出自《周易·乾》"},
        {"word": "厚积薄发", "meaning": "长期积累，慢慢释放", "hint": "出自苏轼《稼说送张琥》"},
        {"word": "脚踏实地", "meaning": "做事踏实认真", "hint": "出自邵伯温《邵氏闻见录》"},
        {"word": "破茧成蝶", "meaning": "经历磨难后获得新生", "hint": "比喻成长中的蜕变"},
        {"word": "勇往直前", "meaning": "勇敢地一直向前进", "hint": "出自朱熹《朱子语类》"},
        {"word": "水滴石穿", "meaning": "坚持不懈，细微之力也能成功", "hint": "出自《汉书·枚乘传》", "confuse": "绳锯木断"},
        {"word": "大器晚成", "meaning": "能担当重任的人成就较晚", "hint": "出自《老子》"},
        {"word": "奋发图强", "meaning": "振作精神，努力谋求强盛", "hint": "常用于激励个人或国家"},
    ],
    "technology": [
        {"word": "日新月异", "meaning": "每天每月都有新的变化，发展很快", "hint": "出自《礼记·大学》“苟日新，日日新”"},
        {"word": "巧夺天工", "meaning": "人工的精巧胜过天然", "hint": "出自赵孟頫《赠放烟火者》", "confuse": "鬼斧神工"},
        {"word": "别出心裁", "meaning": "独创一格，与众不同", "hint": "出自李汝珍《镜花缘》"},
        {"word": "推陈出新", "meaning": "去掉旧的，创造新的", "hint": "出自费衮《梁溪漫志》"},
        {"word": "精益求精", "meaning": "已经很好了还要求更好", "hint": "出自《论语·学而》朱熹注"},
        {"word": "一日千里", "meaning": "形容进展极快", "hint": "出自《庄子·秋水》"},
        {"word": "独具匠心", "meaning": "具有独到的灵巧心思", "hint": "多用于形容技艺和创作"},
        {"word": "突飞猛进", "meaning": "形容事业、学问等进步迅速", "hint": "常用于描述科技发展"},
        {"word": "集思广益", "meaning": "集中众人智慧，广泛吸收有益意见", "hint": "出自诸葛亮《教与军师长史参军掾属》"},
        {"word": "开天辟地", "meaning": "指有史以来，前所未有", "hint": "盘古开天辟地的神话"},
    ],
}

EN_WORDS: Dict[str, List[Entry]] = {
    "learning": [
        {"word": "acquire", "meaning": "to gain knowledge or skill", "hint": "Example: She acquired fluency in French.", "confuse": "obtain"},
        {"word": "diligent", "meaning": "showing care and effort in work", "hint": "Example: A diligent student reviews every night."},
        {"word": "comprehend", "meaning": "to understand fully", "hint": "Example: He could not comprehend the rules.", "confuse": "apprehend"},
        {"word": "curriculum", "meaning": "the subjects in a course of study", "hint": "Example: Coding is now part of the curriculum."},
        {"word": "scholar", "meaning": "a person who studies deeply", "hint": "Example: The scholar spent years in the archive."},
        {"word": "literate", "meaning": "able to read and write", "hint": "Example: Most adults in the town are literate."},
        {"word": "inquire", "meaning": "to ask for information", "hint": "Example: She inquired about the exam date.", "confuse": "enquire"},
        {"word": "memorize", "meaning": "to learn by heart", "hint": "Example: Actors memorize long scripts."},
        {"word": "tutor", "meaning": "a private teacher", "hint": "Example: His tutor helped him with algebra."},
        {"word": "insight", "meaning": "a deep understanding of something", "hint": "Example: The book offers insight into history."},
    ],
    "virtue": [
        {"word": "integrity", "meaning": "being honest and having strong principles", "hint": "Example: A leader of integrity keeps promises."},
        {"word": "humble", "meaning": "not proud or arrogant", "hint": "Example: Despite her fame, she stayed humble."},
        {"word": "generous", "meaning": "willing to give more than expected", "hint": "Example: He was generous with his time."},
        {"word": "sincere", "meaning": "free from pretence", "hint": "Example: Please accept my sincere apology."},
        {"word": "loyal", "meaning": "firm in support of a person or cause", "hint": "Example: The dog stayed loyal to its owner."},
        {"word": "compassion", "meaning": "sympathy for the suffering of others", "hint": "Example: Nurses treat patients with compassion.", "confuse": "passion"},
        {"word": "courage", "meaning": "the ability to face danger or fear", "hint": "Example: It took courage to speak up."},
        {"word": "patience", "meaning": "the ability to wait calmly", "hint": "Example: Teaching requires patience.", "confuse": "patients"},
        {"word": "gratitude", "meaning": "the feeling of being thankful", "hint": "Example: She wrote a note of gratitude."},
        {"word": "modest", "meaning": "not boasting about one's abilities", "hint": "Example: He was modest about his award."},
    ],
    "growth": [
        {"word": "persevere", "meaning": "to keep trying despite difficulty", "hint": "Example: Persevere and you will improve."},
        {"word": "resilient", "meaning": "able to recover quickly from setbacks", "hint": "Example: Children are often resilient."},
        {"word": "mature", "meaning": "fully developed in mind or body", "hint": "Example: She is mature for her age."},
        {"word": "ambition", "meaning": "a strong desire to achieve something", "hint": "Example: His ambition is to become a pilot."},
        {"word": "progress", "meaning": "forward movement toward a goal", "hint": "Example: We made good progress today.", "confuse": "process"},
        {"word": "aspire", "meaning": "to hope to achieve something", "hint": "Example: Many young people aspire to travel.", "confuse": "inspire"},
        {"word": "flourish", "meaning": "to grow or develop well", "hint": "Example: The garden flourished in spring."},
        {"word": "endure", "meaning": "to suffer patiently", "hint": "Example: They endured the long winter."},
        {"word": "evolve", "meaning": "to develop gradually", "hint": "Example: Languages evolve over time."},
        {"word": "milestone", "meaning": "an important stage in development", "hint": "Example: Graduation is a milestone."},
    ],
    "technology": [
        {"word": "innovate", "meaning": "to introduce new methods or ideas", "hint": "Example: Companies must innovate to survive.", "confuse": "renovate"},
        {"word": "algorithm", "meaning": "a set of rules for solving a problem", "hint": "Example: The search engine uses a ranking algorithm."},
        {"word": "automate", "meaning": "to make a process run by machine", "hint": "Example: The factory automated its assembly line."},
        {"word": "device", "meaning": "a thing made for a particular purpose", "hint": "Example: Turn off every electronic device.", "confuse": "devise"},
        {"word": "network", "meaning": "a group of connected computers", "hint": "Example: The office network went down."},
        {"word": "digital", "meaning": "using computer technology", "hint": "Example: Digital cameras replaced film."},
        {"word": "prototype", "meaning": "a first model of a product", "hint": "Example: The engineers tested the prototype."},
        {"word": "encrypt", "meaning": "to convert data into a secret code", "hint": "Example: Messages are encrypted end to end."},
        {"word": "virtual", "meaning": "existing in software, not physically", "hint": "Example: We met in a virtual classroom."},
        {"word": "sensor", "meaning": "a device that detects changes", "hint": "Example: The sensor turns on the lights.", "confuse": "censor"},
    ],
}

WORD_BANKS: Dict[str, Dict[str, List[Entry]]] = {
    "zh": ZH_IDIOMS,
    "en": EN_WORDS,
}
