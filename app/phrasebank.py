"""Fragment tables for card voices and closing lines.

Pure data. Each list is drawn from uniformly; keep entries self-contained
sentences so any combination reads naturally.
"""

from typing import Dict, List

OPENERS: List[str] = [
    "亲爱的，我看到你在这个问题上其实很认真。",
    "我能感受到你对这件事的在意，也能理解你的摇摆。",
    "听到你问“{Q}”，我先想邀请你把注意力放回自己。",
    "关于“{Q}”，我更想把它当作你内心的一次自我对话。",
    "亲爱的，你不是没答案，你只是还在练习相信自己。",
]

# Keyed by Tone value.
FRAMES: Dict[str, List[str]] = {
    "support": [
        "这张牌更像一盏灯：它在提醒你，你已经具备推进的条件。",
        "它的能量偏向支持：当你愿意迈一步，现实会给你回声。",
        "我看到一种“被托住”的感觉——不是运气，而是你准备好了。",
    ],
    "neutral": [
        "这张牌像一面镜子：它让你看见当下的结构与选择。",
        "它不急着给结论，而是在帮你把问题拆成可行动的部分。",
        "它提醒你：先看清楚自己站在哪里，再决定往哪走。",
    ],
    "challenge": [
        "这张牌不温柔，但它很诚实：它在指向你需要面对的那一块。",
        "它像一次提醒：如果继续用旧方式，你会更累；需要换一种应对。",
        "我看到这里有情绪/模式在拉扯你——先照顾好自己，再处理事情。",
    ],
}

# Keyed by Topic value.
TOPIC_HINTS: Dict[str, List[str]] = {
    "关系": [
        "在关系里，先问自己：我是在渴望连接，还是在害怕失去？",
        "把边界说清楚，会比反复猜测更能保护你。",
        "你可以把“期待”换成“请求”，沟通会轻很多。",
    ],
    "事业": [
        "在事业上，先把目标缩小到“下一步可执行动作”。",
        "你不需要一次做对全部选择，只需要先做对下一件事。",
        "把精力从“别人怎么看”收回到“我想成为什么样的人”。",
    ],
    "金钱": [
        "金钱议题背后常常是安全感：先稳住，再谈扩张。",
        "做预算不是限制，而是给自己可控感。",
        "把冲动消费/焦虑投资换成更小、更稳定的行动。",
    ],
    "成长": [
        "学习/成长其实是建立节奏：今天做一点，长期就会很强。",
        "你不缺能力，缺的是一个能持续的计划。",
        "把目标拆到“可完成”，自信就会慢慢回到你身上。",
    ],
    "情绪": [
        "先不急着解决问题，先安顿情绪：呼吸、睡眠、饮食是底盘。",
        "给自己一个允许：允许难过、允许不确定。",
        "把“我必须立刻想明白”换成“我可以一步步看清”。",
    ],
    "方向": [
        "方向不是想出来的，是走出来的：先迈一小步再校准。",
        "你可以把选择当成实验：先验证，再决定。",
        "把注意力放在你能控制的部分，焦虑会下降很多。",
    ],
}

ACTIONS: Dict[str, List[str]] = {
    "support": [
        "今天就做一件小事：把你最想推进的那一步写下来，然后立刻开始 10 分钟。",
        "你可以允许自己更大胆一点：先行动，再优化，不必等完美。",
        "请把你的“想法”落到日程里——安排一个具体时间点去做。",
    ],
    "neutral": [
        "建议你列出 2 个选项的“代价/收益”，然后选择更符合你价值观的那一个。",
        "先把信息补齐：你缺的不是勇气，而是一个更清晰的事实列表。",
        "给自己 48 小时：观察、记录、再决定，别在情绪峰值里拍板。",
    ],
    "challenge": [
        "现在最重要的是止损：先停下让你持续消耗的那件事，给自己一点空间。",
        "建议你先做情绪清理：写下你最怕发生的 3 件事，然后逐一评估它们的真实概率。",
        "别硬撑。先找一个支持：朋友/咨询/教练，让你不必一个人扛。",
    ],
}

CLOSERS: List[str] = [
    "你不用一次变得很强，你只要对自己更诚实一点点就够了。",
    "你值得一个更轻松、更清醒的选择。",
    "把决定权收回来：你的人生，不需要向任何人证明。",
    "你会走过去的，而且会更明白自己要什么。",
]

TOPIC_BRIDGE = "这意味着你当下更需要在「{topic}」上做更清晰的选择。"
KEYWORD_CLAUSE = "我还注意到一个关键词：{keyword}。"

# Closing line: A + B, then C, then D.
CLOSING_A: List[str] = [
    "这是你的世界，",
    "亲爱的，",
    "此刻就是入口，",
    "你正在写下一条新的时间线，",
]
CLOSING_B: List[str] = [
    "一切可能性都存在于当下。",
    "现实会跟随你持续的注意力移动。",
    "选择不是证明对错，而是决定你要体验什么。",
    "当你把心安住，路就会自己出现。",
]
CLOSING_C: List[str] = [
    "把注意力放回你想成为的那个人。",
    "先选一个方向，然后让行动去确认它。",
    "别再等待“完全确定”，先迈出那一步。",
    "温柔但坚定地做决定。",
]
CLOSING_D: List[str] = [
    "你会被你真正的选择托住。",
    "你并不缺力量，你只是在练习使用它。",
    "勇敢不是不怕，而是仍然愿意前进。",
    "现在就好——从这一刻开始。",
]
