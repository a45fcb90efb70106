"""
Spell Checker Dictionary
========================
Static in-memory word list for the offline spell checker.

Entries are lowercase. Inflected forms that the suffix rules in
spell_checker can derive are still listed where they are irregular or
very common, so lookups stay a single set membership test.
"""

__version__ = "1.0.0"


COMMON_WORDS = frozenset({
    # Articles, pronouns, and determiners
    'a', 'an', 'the', 'i', 'you', 'he', 'she', 'it', 'we', 'they', 'me', 'him', 'her', 'us',
    'them', 'my', 'your', 'his', 'its', 'our', 'their', 'mine', 'yours', 'hers', 'ours',
    'theirs', 'this', 'that', 'these', 'those', 'who', 'whom', 'whose', 'which', 'what',
    'whatever', 'whoever', 'whomever', 'whichever', 'myself', 'yourself', 'himself', 'herself',
    'itself', 'ourselves', 'yourselves', 'themselves', 'each', 'every', 'either', 'neither',
    'both', 'all', 'any', 'some', 'no', 'none', 'one', 'ones', 'other', 'another', 'such',
    'same',

    # Common verbs (all tenses)
    'is', 'am', 'are', 'was', 'were', 'be', 'been', 'being', 'have', 'has', 'had', 'having',
    'do', 'does', 'did', 'doing', 'done', 'will', 'would', 'shall', 'should', 'may', 'might',
    'must', 'can', 'could', 'go', 'goes', 'went', 'gone', 'going', 'come', 'comes', 'came',
    'coming', 'get', 'gets', 'got', 'gotten', 'getting', 'make', 'makes', 'made', 'making',
    'say', 'says', 'said', 'saying', 'see', 'sees', 'saw', 'seen', 'seeing', 'take', 'takes',
    'took', 'taken', 'taking', 'know', 'knows', 'knew', 'known', 'knowing', 'think', 'thinks',
    'thought', 'thinking', 'give', 'gives', 'gave', 'given', 'giving', 'find', 'finds', 'found',
    'finding', 'tell', 'tells', 'told', 'telling', 'want', 'wants', 'wanted', 'wanting', 'use',
    'uses', 'used', 'using', 'try', 'tries', 'tried', 'trying', 'need', 'needs', 'needed',
    'needing', 'feel', 'feels', 'felt', 'feeling', 'become', 'becomes', 'became', 'becoming',
    'leave', 'leaves', 'left', 'leaving', 'put', 'puts', 'putting', 'mean', 'means', 'meant',
    'meaning', 'keep', 'keeps', 'kept', 'keeping', 'let', 'lets', 'letting', 'begin', 'begins',
    'began', 'begun', 'beginning', 'seem', 'seems', 'seemed', 'seeming', 'help', 'helps',
    'helped', 'helping', 'show', 'shows', 'showed', 'shown', 'showing', 'hear', 'hears',
    'heard', 'hearing', 'play', 'plays', 'played', 'playing', 'run', 'runs', 'ran', 'running',
    'move', 'moves', 'moved', 'moving', 'live', 'lives', 'lived', 'living', 'believe',
    'believes', 'believed', 'believing', 'hold', 'holds', 'held', 'holding', 'bring', 'brings',
    'brought', 'bringing', 'happen', 'happens', 'happened', 'happening', 'write', 'writes',
    'wrote', 'written', 'writing', 'read', 'reads', 'reading', 'learn', 'learns', 'learned',
    'learnt', 'learning', 'change', 'changes', 'changed', 'changing', 'follow', 'follows',
    'followed', 'following', 'stop', 'stops', 'stopped', 'stopping', 'create', 'creates',
    'created', 'creating', 'speak', 'speaks', 'spoke', 'spoken', 'speaking', 'allow', 'allows',
    'allowed', 'allowing', 'add', 'adds', 'added', 'adding', 'grow', 'grows', 'grew', 'grown',
    'growing', 'open', 'opens', 'opened', 'opening', 'walk', 'walks', 'walked', 'walking',
    'win', 'wins', 'won', 'winning', 'offer', 'offers', 'offered', 'offering', 'remember',
    'remembers', 'remembered', 'remembering', 'love', 'loves', 'loved', 'loving', 'consider',
    'considers', 'considered', 'considering', 'appear', 'appears', 'appeared', 'appearing',
    'buy', 'buys', 'bought', 'buying', 'wait', 'waits', 'waited', 'waiting', 'serve', 'serves',
    'served', 'serving', 'die', 'dies', 'died', 'dying', 'send', 'sends', 'sent', 'sending',
    'expect', 'expects', 'expected', 'expecting', 'build', 'builds', 'built', 'building',
    'stay', 'stays', 'stayed', 'staying', 'fall', 'falls', 'fell', 'fallen', 'falling', 'cut',
    'cuts', 'cutting', 'reach', 'reaches', 'reached', 'reaching', 'kill', 'kills', 'killed',
    'killing', 'remain', 'remains', 'remained', 'remaining', 'suggest', 'suggests', 'suggested',
    'suggesting', 'raise', 'raises', 'raised', 'raising', 'pass', 'passes', 'passed', 'passing',
    'sell', 'sells', 'sold', 'selling', 'require', 'requires', 'required', 'requiring',
    'report', 'reports', 'reported', 'reporting', 'decide', 'decides', 'decided', 'deciding',
    'pull', 'pulls', 'pulled', 'pulling', 'develop', 'develops', 'developed', 'developing',
    'agree', 'agrees', 'agreed', 'agreeing', 'carry', 'carries', 'carried', 'carrying',
    'describe', 'describes', 'described', 'describing', 'receive', 'receives', 'received',
    'receiving', 'sit', 'sits', 'sat', 'sitting', 'stand', 'stands', 'stood', 'standing',
    'lose', 'loses', 'lost', 'losing', 'pay', 'pays', 'paid', 'paying', 'meet', 'meets', 'met',
    'meeting', 'include', 'includes', 'included', 'including', 'continue', 'continues',
    'continued', 'continuing', 'set', 'sets', 'setting', 'draw', 'draws', 'drew', 'drawn',
    'drawing', 'drive', 'drives', 'drove', 'driven', 'driving', 'break', 'breaks', 'broke',
    'broken', 'breaking', 'spend', 'spends', 'spent', 'spending', 'watch', 'watches', 'watched',
    'watching', 'explain', 'explains', 'explained', 'explaining', 'turn', 'turns', 'turned',
    'turning', 'point', 'points', 'pointed', 'pointing', 'fill', 'fills', 'filled', 'filling',
    'replace', 'replaces', 'replaced', 'replacing', 'control', 'controls', 'controlled',
    'controlling', 'protect', 'protects', 'protected', 'protecting', 'support', 'supports',
    'supported', 'supporting', 'cover', 'covers', 'covered', 'covering', 'remove', 'removes',
    'removed', 'removing', 'return', 'returns', 'returned', 'returning', 'produce', 'produces',
    'produced', 'producing', 'eat', 'eats', 'ate', 'eaten', 'eating', 'save', 'saves', 'saved',
    'saving', 'share', 'shares', 'shared', 'sharing', 'provide', 'provides', 'provided',
    'providing', 'reduce', 'reduces', 'reduced', 'reducing', 'establish', 'establishes',
    'established', 'establishing', 'hang', 'hangs', 'hung', 'hanging', 'close', 'closes',
    'closed', 'closing', 'answer', 'answers', 'answered', 'answering', 'ask', 'asks', 'asked',
    'asking', 'fly', 'flies', 'flew', 'flown', 'flying', 'prepare', 'prepares', 'prepared',
    'preparing', 'wear', 'wears', 'wore', 'worn', 'wearing', 'accept', 'accepts', 'accepted',
    'accepting', 'apply', 'applies', 'applied', 'applying', 'choose', 'chooses', 'chose',
    'chosen', 'choosing', 'contain', 'contains', 'contained', 'containing', 'enjoy', 'enjoys',
    'enjoyed', 'enjoying', 'express', 'expresses', 'expressed', 'expressing', 'finish',
    'finishes', 'finished', 'finishing', 'forget', 'forgets', 'forgot', 'forgotten',
    'forgetting', 'imagine', 'imagines', 'imagined', 'imagining', 'improve', 'improves',
    'improved', 'improving', 'involve', 'involves', 'involved', 'involving', 'manage',
    'manages', 'managed', 'managing', 'miss', 'misses', 'missed', 'missing', 'notice',
    'notices', 'noticed', 'noticing', 'perform', 'performs', 'performed', 'performing', 'pick',
    'picks', 'picked', 'picking', 'plan', 'plans', 'planned', 'planning', 'prefer', 'prefers',
    'preferred', 'preferring', 'present', 'presents', 'presented', 'presenting', 'press',
    'presses', 'pressed', 'pressing', 'promise', 'promises', 'promised', 'promising', 'prove',
    'proves', 'proved', 'proven', 'proving', 'push', 'pushes', 'pushed', 'pushing', 'recognize',
    'recognizes', 'recognized', 'recognizing', 'refer', 'refers', 'referred', 'referring',
    'refuse', 'refuses', 'refused', 'refusing', 'release', 'releases', 'released', 'releasing',
    'represent', 'represents', 'represented', 'representing', 'respond', 'responds',
    'responded', 'responding', 'rest', 'rests', 'rested', 'resting', 'reveal', 'reveals',
    'revealed', 'revealing', 'sleep', 'sleeps', 'slept', 'sleeping', 'start', 'starts',
    'started', 'starting', 'study', 'studies', 'studied', 'studying', 'succeed', 'succeeds',
    'succeeded', 'succeeding', 'suffer', 'suffers', 'suffered', 'suffering', 'suppose',
    'supposes', 'supposed', 'supposing', 'teach', 'teaches', 'taught', 'teaching', 'test',
    'tests', 'tested', 'testing', 'thank', 'thanks', 'thanked', 'thanking', 'touch', 'touches',
    'touched', 'touching', 'train', 'trains', 'trained', 'training', 'travel', 'travels',
    'travelled', 'traveled', 'travelling', 'traveling', 'treat', 'treats', 'treated',
    'treating', 'understand', 'understands', 'understood', 'understanding', 'visit', 'visits',
    'visited', 'visiting', 'wonder', 'wonders', 'wondered', 'wondering', 'worry', 'worries',
    'worried', 'worrying', 'wish', 'wishes', 'wished', 'wishing', 'work', 'works', 'worked',
    'working', 'call', 'calls', 'called', 'calling', 'cause', 'causes', 'caused', 'causing',
    'claim', 'claims', 'claimed', 'claiming', 'compare', 'compares', 'compared', 'comparing',
    'complete', 'completes', 'completed', 'completing', 'confirm', 'confirms', 'confirmed',
    'confirming', 'connect', 'connects', 'connected', 'connecting', 'copy', 'copies', 'copied',
    'copying', 'count', 'counts', 'counted', 'counting', 'delete', 'deletes', 'deleted',
    'deleting', 'deliver', 'delivers', 'delivered', 'delivering', 'demand', 'demands',
    'demanded', 'demanding', 'deny', 'denies', 'denied', 'denying', 'design', 'designs',
    'designed', 'designing', 'destroy', 'destroys', 'destroyed', 'destroying', 'determine',
    'determines', 'determined', 'determining', 'discover', 'discovers', 'discovered',
    'discovering', 'discuss', 'discusses', 'discussed', 'discussing', 'doubt', 'doubts',
    'doubted', 'doubting', 'drop', 'drops', 'dropped', 'dropping', 'encourage', 'encourages',
    'encouraged', 'encouraging', 'enter', 'enters', 'entered', 'entering', 'escape', 'escapes',
    'escaped', 'escaping', 'examine', 'examines', 'examined', 'examining', 'exist', 'exists',
    'existed', 'existing', 'experience', 'experiences', 'experienced', 'experiencing',
    'explore', 'explores', 'explored', 'exploring', 'face', 'faces', 'faced', 'facing', 'fail',
    'fails', 'failed', 'failing', 'force', 'forces', 'forced', 'forcing', 'form', 'forms',
    'formed', 'forming', 'gather', 'gathers', 'gathered', 'gathering', 'generate', 'generates',
    'generated', 'generating', 'grab', 'grabs', 'grabbed', 'grabbing', 'grant', 'grants',
    'granted', 'granting', 'guess', 'guesses', 'guessed', 'guessing', 'handle', 'handles',
    'handled', 'handling', 'hate', 'hates', 'hated', 'hating', 'hit', 'hits', 'hitting', 'hope',
    'hopes', 'hoped', 'hoping', 'identify', 'identifies', 'identified', 'identifying', 'ignore',
    'ignores', 'ignored', 'ignoring', 'increase', 'increases', 'increased', 'increasing',
    'indicate', 'indicates', 'indicated', 'indicating', 'insist', 'insists', 'insisted',
    'insisting', 'intend', 'intends', 'intended', 'intending', 'introduce', 'introduces',
    'introduced', 'introducing', 'invite', 'invites', 'invited', 'inviting', 'join', 'joins',
    'joined', 'joining', 'judge', 'judges', 'judged', 'judging', 'jump', 'jumps', 'jumped',
    'jumping', 'kick', 'kicks', 'kicked', 'kicking', 'kiss', 'kisses', 'kissed', 'kissing',
    'knock', 'knocks', 'knocked', 'knocking', 'lack', 'lacks', 'lacked', 'lacking', 'last',
    'lasts', 'lasted', 'lasting', 'laugh', 'laughs', 'laughed', 'laughing', 'launch',
    'launches', 'launched', 'launching', 'lay', 'lays', 'laid', 'laying', 'lead', 'leads',
    'led', 'leading', 'lift', 'lifts', 'lifted', 'lifting', 'limit', 'limits', 'limited',
    'limiting', 'link', 'links', 'linked', 'linking', 'list', 'lists', 'listed', 'listing',
    'listen', 'listens', 'listened', 'listening', 'load', 'loads', 'loaded', 'loading', 'lock',
    'locks', 'locked', 'locking', 'look', 'looks', 'looked', 'looking', 'maintain', 'maintains',
    'maintained', 'maintaining', 'mark', 'marks', 'marked', 'marking', 'match', 'matches',
    'matched', 'matching', 'matter', 'matters', 'mattered', 'mattering', 'measure', 'measures',
    'measured', 'measuring', 'mention', 'mentions', 'mentioned', 'mentioning', 'mix', 'mixes',
    'mixed', 'mixing', 'note', 'notes', 'noted', 'noting', 'obtain', 'obtains', 'obtained',
    'obtaining', 'occur', 'occurs', 'occurred', 'occurring', 'operate', 'operates', 'operated',
    'operating', 'order', 'orders', 'ordered', 'ordering', 'organize', 'organizes', 'organized',
    'organizing', 'organise', 'organises', 'organised', 'organising', 'own', 'owns', 'owned',
    'owning', 'place', 'places', 'placed', 'placing', 'post', 'posts', 'posted', 'posting',
    'pour', 'pours', 'poured', 'pouring', 'practice', 'practices', 'practiced', 'practicing',
    'practise', 'practises', 'practised', 'practising', 'predict', 'predicts', 'predicted',
    'predicting', 'prevent', 'prevents', 'prevented', 'preventing', 'print', 'prints',
    'printed', 'printing', 'process', 'processes', 'processed', 'processing', 'promote',
    'promotes', 'promoted', 'promoting', 'propose', 'proposes', 'proposed', 'proposing',
    'purchase', 'purchases', 'purchased', 'purchasing', 'pursue', 'pursues', 'pursued',
    'pursuing', 'quit', 'quits', 'quitting', 'race', 'races', 'raced', 'racing', 'rain',
    'rains', 'rained', 'raining', 'react', 'reacts', 'reacted', 'reacting', 'realize',
    'realizes', 'realized', 'realizing', 'realise', 'realises', 'realised', 'realising',
    'recall', 'recalls', 'recalled', 'recalling', 'record', 'records', 'recorded', 'recording',
    'reflect', 'reflects', 'reflected', 'reflecting', 'regard', 'regards', 'regarded',
    'regarding', 'reject', 'rejects', 'rejected', 'rejecting', 'relate', 'relates', 'related',
    'relating', 'relax', 'relaxes', 'relaxed', 'relaxing', 'rely', 'relies', 'relied',
    'relying', 'remind', 'reminds', 'reminded', 'reminding', 'repeat', 'repeats', 'repeated',
    'repeating', 'request', 'requests', 'requested', 'requesting', 'research', 'researches',
    'researched', 'researching', 'resolve', 'resolves', 'resolved', 'resolving', 'respect',
    'respects', 'respected', 'respecting', 'restore', 'restores', 'restored', 'restoring',
    'restrict', 'restricts', 'restricted', 'restricting', 'result', 'results', 'resulted',
    'resulting', 'retire', 'retires', 'retired', 'retiring', 'review', 'reviews', 'reviewed',
    'reviewing', 'ride', 'rides', 'rode', 'ridden', 'riding', 'ring', 'rings', 'rang', 'rung',
    'ringing', 'rise', 'rises', 'rose', 'risen', 'rising', 'roll', 'rolls', 'rolled', 'rolling',
    'rush', 'rushes', 'rushed', 'rushing', 'satisfy', 'satisfies', 'satisfied', 'satisfying',
    'scan', 'scans', 'scanned', 'scanning', 'score', 'scores', 'scored', 'scoring', 'search',
    'searches', 'searched', 'searching', 'seek', 'seeks', 'sought', 'seeking', 'select',
    'selects', 'selected', 'selecting', 'separate', 'separates', 'separated', 'separating',
    'settle', 'settles', 'settled', 'settling', 'shake', 'shakes', 'shook', 'shaken', 'shaking',
    'shape', 'shapes', 'shaped', 'shaping', 'shift', 'shifts', 'shifted', 'shifting', 'shine',
    'shines', 'shone', 'shining', 'shoot', 'shoots', 'shot', 'shooting', 'shop', 'shops',
    'shopped', 'shopping', 'shout', 'shouts', 'shouted', 'shouting', 'shut', 'shuts',
    'shutting', 'sign', 'signs', 'signed', 'signing', 'sing', 'sings', 'sang', 'sung',
    'singing', 'slip', 'slips', 'slipped', 'slipping', 'smile', 'smiles', 'smiled', 'smiling',
    'smoke', 'smokes', 'smoked', 'smoking', 'solve', 'solves', 'solved', 'solving', 'sort',
    'sorts', 'sorted', 'sorting', 'sound', 'sounds', 'sounded', 'sounding', 'split', 'splits',
    'splitting', 'spread', 'spreads', 'spreading', 'stare', 'stares', 'stared', 'staring',
    'state', 'states', 'stated', 'stating', 'steal', 'steals', 'stole', 'stolen', 'stealing',
    'stick', 'sticks', 'stuck', 'sticking', 'store', 'stores', 'stored', 'storing', 'strike',
    'strikes', 'struck', 'striking', 'struggle', 'struggles', 'struggled', 'struggling',
    'submit', 'submits', 'submitted', 'submitting', 'supply', 'supplies', 'supplied',
    'supplying', 'surprise', 'surprises', 'surprised', 'surprising', 'surround', 'surrounds',
    'surrounded', 'surrounding', 'survive', 'survives', 'survived', 'surviving', 'suspect',
    'suspects', 'suspected', 'suspecting', 'swim', 'swims', 'swam', 'swum', 'swimming',
    'switch', 'switches', 'switched', 'switching', 'talk', 'talks', 'talked', 'talking',
    'target', 'targets', 'targeted', 'targeting', 'taste', 'tastes', 'tasted', 'tasting',
    'tear', 'tears', 'tore', 'torn', 'tearing', 'tend', 'tends', 'tended', 'tending',
    'threaten', 'threatens', 'threatened', 'threatening', 'throw', 'throws', 'threw', 'thrown',
    'throwing', 'tie', 'ties', 'tied', 'tying', 'track', 'tracks', 'tracked', 'tracking',
    'trade', 'trades', 'traded', 'trading', 'transfer', 'transfers', 'transferred',
    'transferring', 'transform', 'transforms', 'transformed', 'transforming', 'translate',
    'translates', 'translated', 'translating', 'trust', 'trusts', 'trusted', 'trusting', 'type',
    'types', 'typed', 'typing', 'unite', 'unites', 'united', 'uniting', 'update', 'updates',
    'updated', 'updating', 'urge', 'urges', 'urged', 'urging', 'vary', 'varies', 'varied',
    'varying', 'view', 'views', 'viewed', 'viewing', 'vote', 'votes', 'voted', 'voting', 'wake',
    'wakes', 'woke', 'woken', 'waking', 'warn', 'warns', 'warned', 'warning', 'wash', 'washes',
    'washed', 'washing', 'waste', 'wastes', 'wasted', 'wasting', 'weigh', 'weighs', 'weighed',
    'weighing', 'welcome', 'welcomes', 'welcomed', 'welcoming', 'whisper', 'whispers',
    'whispered', 'whispering', 'wrap', 'wraps', 'wrapped', 'wrapping', 'yell', 'yells',
    'yelled', 'yelling', 'yield', 'yields', 'yielded', 'yielding',

    # Common nouns
    'time', 'year', 'years', 'people', 'way', 'ways', 'day', 'days', 'man', 'men', 'woman',
    'women', 'child', 'children', 'world', 'life', 'hand', 'hands', 'part', 'parts', 'case',
    'cases', 'week', 'weeks', 'company', 'companies', 'system', 'systems', 'program',
    'programs', 'programme', 'programmes', 'question', 'questions', 'government', 'governments',
    'number', 'numbers', 'night', 'nights', 'home', 'homes', 'water', 'waters', 'room', 'rooms',
    'mother', 'mothers', 'father', 'fathers', 'area', 'areas', 'money', 'story', 'stories',
    'fact', 'facts', 'month', 'months', 'lot', 'lots', 'right', 'rights', 'book', 'books',
    'eye', 'eyes', 'job', 'jobs', 'word', 'words', 'business', 'businesses', 'issue', 'issues',
    'side', 'sides', 'kind', 'kinds', 'head', 'heads', 'house', 'houses', 'service', 'services',
    'friend', 'friends', 'power', 'powers', 'hour', 'hours', 'game', 'games', 'line', 'lines',
    'end', 'ends', 'member', 'members', 'law', 'laws', 'car', 'cars', 'city', 'cities',
    'community', 'communities', 'name', 'names', 'president', 'presidents', 'team', 'teams',
    'minute', 'minutes', 'idea', 'ideas', 'kid', 'kids', 'body', 'bodies', 'information',
    'back', 'backs', 'parent', 'parents', 'others', 'level', 'levels', 'office', 'offices',
    'door', 'doors', 'health', 'person', 'persons', 'art', 'arts', 'war', 'wars', 'history',
    'histories', 'party', 'parties', 'morning', 'mornings', 'reason', 'reasons', 'girl',
    'girls', 'guy', 'guys', 'moment', 'moments', 'air', 'teacher', 'teachers', 'education',
    'foot', 'feet', 'food', 'foods', 'student', 'students', 'group', 'groups', 'country',
    'countries', 'problem', 'problems', 'school', 'schools', 'family', 'families', 'thing',
    'things', 'example', 'examples', 'paper', 'papers', 'music', 'boy', 'boys', 'age', 'ages',
    'policy', 'policies', 'action', 'actions', 'activity', 'activities', 'agency', 'agencies',
    'agreement', 'agreements', 'amount', 'amounts', 'analysis', 'analyses', 'animal', 'animals',
    'approach', 'approaches', 'article', 'articles', 'attention', 'audience', 'audiences',
    'author', 'authors', 'bank', 'banks', 'bed', 'beds', 'behavior', 'behaviour', 'behaviors',
    'behaviours', 'benefit', 'benefits', 'bill', 'bills', 'bit', 'bits', 'blood', 'board',
    'boards', 'brother', 'brothers', 'budget', 'budgets', 'buildings', 'campaign', 'campaigns',
    'cancer', 'capital', 'career', 'careers', 'cell', 'cells', 'center', 'centers', 'centre',
    'centres', 'century', 'centuries', 'challenge', 'challenges', 'chance', 'chances',
    'character', 'characters', 'charge', 'charges', 'choice', 'choices', 'church', 'churches',
    'class', 'classes', 'coach', 'coaches', 'college', 'colleges', 'color', 'colors', 'colour',
    'colours', 'comment', 'comments', 'commission', 'commissions', 'computer', 'computers',
    'concern', 'concerns', 'condition', 'conditions', 'conference', 'conferences', 'congress',
    'connection', 'connections', 'consumer', 'consumers', 'content', 'contents', 'context',
    'contexts', 'contract', 'contracts', 'contribution', 'contributions', 'conversation',
    'conversations', 'cost', 'costs', 'council', 'councils', 'couple', 'couples', 'course',
    'courses', 'court', 'courts', 'credit', 'credits', 'crime', 'crimes', 'crisis', 'crises',
    'culture', 'cultures', 'customer', 'customers', 'data', 'daughter', 'daughters', 'deal',
    'deals', 'death', 'deaths', 'debate', 'debates', 'decade', 'decades', 'decision',
    'decisions', 'defense', 'defenses', 'defence', 'defences', 'degree', 'degrees', 'democracy',
    'democracies', 'department', 'departments', 'detail', 'details', 'development',
    'developments', 'difference', 'differences', 'direction', 'directions', 'director',
    'directors', 'discussion', 'discussions', 'disease', 'diseases', 'doctor', 'doctors', 'dog',
    'dogs', 'dollar', 'dollars', 'drug', 'drugs', 'economy', 'economies', 'edge', 'edges',
    'effect', 'effects', 'effort', 'efforts', 'election', 'elections', 'element', 'elements',
    'employee', 'employees', 'energy', 'environment', 'environments', 'equipment', 'era',
    'eras', 'error', 'errors', 'event', 'events', 'evidence', 'exchange', 'exchanges',
    'executive', 'executives', 'exercise', 'exercises', 'expert', 'experts', 'facility',
    'facilities', 'factor', 'factors', 'failure', 'failures', 'fear', 'fears', 'feature',
    'features', 'feelings', 'field', 'fields', 'figure', 'figures', 'file', 'files', 'film',
    'films', 'finger', 'fingers', 'fire', 'fires', 'firm', 'firms', 'floor', 'floors', 'focus',
    'freedom', 'freedoms', 'front', 'fronts', 'function', 'functions', 'fund', 'funds',
    'future', 'futures', 'garden', 'gardens', 'gas', 'goal', 'goals', 'gold', 'ground',
    'grounds', 'growth', 'gun', 'guns', 'hair', 'half', 'halves', 'heart', 'hearts', 'heat',
    'horse', 'horses', 'hospital', 'hospitals', 'hotel', 'hotels', 'husband', 'husbands',
    'image', 'images', 'impact', 'impacts', 'importance', 'income', 'incomes', 'individual',
    'individuals', 'industry', 'industries', 'influence', 'influences', 'institution',
    'institutions', 'interest', 'interests', 'interview', 'interviews', 'investment',
    'investments', 'island', 'islands', 'item', 'items', 'knowledge', 'land', 'lands',
    'language', 'languages', 'leader', 'leaders', 'leg', 'legs', 'letter', 'letters', 'light',
    'lights', 'loss', 'losses', 'machine', 'machines', 'magazine', 'magazines', 'majority',
    'majorities', 'management', 'manager', 'managers', 'market', 'markets', 'marriage',
    'marriages', 'material', 'materials', 'meal', 'meals', 'meanings', 'media', 'meetings',
    'memory', 'memories', 'message', 'messages', 'method', 'methods', 'middle', 'military',
    'mind', 'minds', 'minister', 'ministers', 'minority', 'minorities', 'mission', 'missions',
    'model', 'models', 'movie', 'movies', 'nation', 'nations', 'nature', 'network', 'networks',
    'news', 'newspaper', 'newspapers', 'object', 'objects', 'official', 'officials', 'oil',
    'operation', 'operations', 'opinion', 'opinions', 'opportunity', 'opportunities', 'option',
    'options', 'organization', 'organizations', 'organisation', 'organisations', 'owner',
    'owners', 'page', 'pages', 'pain', 'pains', 'painting', 'paintings', 'pair', 'pairs',
    'park', 'parks', 'partner', 'partners', 'patient', 'patients', 'pattern', 'patterns',
    'peace', 'performance', 'performances', 'period', 'periods', 'phone', 'phones', 'photo',
    'photos', 'photograph', 'photographs', 'picture', 'pictures', 'piece', 'pieces', 'plant',
    'plants', 'player', 'players', 'police', 'population', 'populations', 'position',
    'positions', 'possibility', 'possibilities', 'presence', 'pressure', 'pressures', 'price',
    'prices', 'principle', 'principles', 'prison', 'prisons', 'procedure', 'procedures',
    'product', 'products', 'production', 'profession', 'professions', 'professor', 'professors',
    'profit', 'profits', 'project', 'projects', 'property', 'properties', 'proposal',
    'proposals', 'protection', 'public', 'purpose', 'purposes', 'quality', 'qualities', 'radio',
    'radios', 'range', 'ranges', 'rate', 'rates', 'reaction', 'reactions', 'reader', 'readers',
    'reality', 'realities', 'region', 'regions', 'relation', 'relations', 'relationship',
    'relationships', 'religion', 'religions', 'reporter', 'reporters', 'republic', 'republics',
    'requirement', 'requirements', 'resource', 'resources', 'response', 'responses',
    'responsibility', 'responsibilities', 'restaurant', 'restaurants', 'risk', 'risks', 'road',
    'roads', 'rock', 'rocks', 'role', 'roles', 'rule', 'rules', 'safety', 'sale', 'sales',
    'scene', 'scenes', 'science', 'sciences', 'screen', 'screens', 'season', 'seasons', 'seat',
    'seats', 'section', 'sections', 'security', 'securities', 'sense', 'senses', 'series',
    'session', 'sessions', 'sex', 'shots', 'site', 'sites', 'situation', 'situations', 'size',
    'sizes', 'skill', 'skills', 'skin', 'skins', 'society', 'societies', 'soldier', 'soldiers',
    'solution', 'solutions', 'son', 'sons', 'song', 'songs', 'source', 'sources', 'space',
    'spaces', 'species', 'speech', 'speeches', 'speed', 'speeds', 'spirit', 'spirits', 'sport',
    'sports', 'spot', 'spots', 'staff', 'stage', 'stages', 'standard', 'standards', 'star',
    'stars', 'station', 'stations', 'status', 'statuses', 'step', 'steps', 'stock', 'stocks',
    'strategy', 'strategies', 'street', 'streets', 'strength', 'strengths', 'structure',
    'structures', 'style', 'styles', 'subject', 'subjects', 'success', 'successes', 'summer',
    'summers', 'sun', 'surface', 'surfaces', 'table', 'tables', 'tax', 'taxes', 'technology',
    'technologies', 'television', 'televisions', 'term', 'terms', 'text', 'texts', 'theory',
    'theories', 'thoughts', 'threat', 'threats', 'title', 'titles', 'today', 'tonight', 'tool',
    'tools', 'top', 'tops', 'topic', 'topics', 'total', 'totals', 'town', 'towns', 'tradition',
    'traditions', 'treatment', 'treatments', 'tree', 'trees', 'trend', 'trends', 'trial',
    'trials', 'trip', 'trips', 'trouble', 'troubles', 'truck', 'trucks', 'truth', 'truths',
    'unit', 'units', 'university', 'universities', 'user', 'users', 'value', 'values',
    'variety', 'varieties', 'version', 'versions', 'victim', 'victims', 'victory', 'victories',
    'video', 'videos', 'village', 'villages', 'violence', 'vision', 'visions', 'voice',
    'voices', 'wall', 'walls', 'wave', 'waves', 'weapon', 'weapons', 'weather', 'website',
    'websites', 'weekend', 'weekends', 'weight', 'weights', 'west', 'wife', 'wives', 'window',
    'windows', 'winter', 'winters', 'wood', 'woods', 'worker', 'workers', 'writer', 'writers',
    'yard', 'yards', 'yesterday',

    # Common adjectives
    'good', 'better', 'best', 'new', 'newer', 'newest', 'first', 'long', 'longer', 'longest',
    'great', 'greater', 'greatest', 'little', 'less', 'least', 'old', 'older', 'oldest', 'big',
    'bigger', 'biggest', 'high', 'higher', 'highest', 'different', 'small', 'smaller',
    'smallest', 'large', 'larger', 'largest', 'next', 'early', 'earlier', 'earliest', 'young',
    'younger', 'youngest', 'important', 'few', 'fewer', 'fewest', 'bad', 'worse', 'worst',
    'able', 'sure', 'free', 'freer', 'freest', 'true', 'truer', 'truest', 'whole', 'real',
    'black', 'white', 'red', 'blue', 'green', 'yellow', 'orange', 'purple', 'pink', 'brown',
    'grey', 'gray', 'full', 'fuller', 'fullest', 'easy', 'easier', 'easiest', 'hard', 'harder',
    'hardest', 'clear', 'clearer', 'clearest', 'recent', 'certain', 'personal', 'closer',
    'closest', 'possible', 'impossible', 'simple', 'simpler', 'simplest', 'strong', 'stronger',
    'strongest', 'special', 'social', 'political', 'local', 'national', 'international',
    'human', 'natural', 'beautiful', 'happy', 'happier', 'happiest', 'final', 'main', 'major',
    'available', 'common', 'current', 'economic', 'environmental', 'federal', 'financial',
    'foreign', 'general', 'global', 'hot', 'hotter', 'hottest', 'cold', 'colder', 'coldest',
    'dark', 'darker', 'darkest', 'deep', 'deeper', 'deepest', 'direct', 'effective', 'entire',
    'equal', 'exact', 'fair', 'famous', 'fast', 'faster', 'fastest', 'fine', 'finer', 'finest',
    'fresh', 'glad', 'golden', 'heavy', 'heavier', 'heaviest', 'huge', 'immediate', 'initial',
    'key', 'legal', 'likely', 'low', 'lower', 'lowest', 'medical', 'modern', 'narrow',
    'negative', 'normal', 'obvious', 'original', 'particular', 'past', 'perfect', 'physical',
    'popular', 'positive', 'potential', 'powerful', 'previous', 'primary', 'private',
    'professional', 'proper', 'proud', 'quick', 'quicker', 'quickest', 'quiet', 'quieter',
    'quietest', 'rapid', 'ready', 'regular', 'relative', 'religious', 'responsible', 'rich',
    'richer', 'richest', 'rough', 'round', 'safe', 'safer', 'safest', 'scientific', 'secret',
    'senior', 'serious', 'sharp', 'sharper', 'sharpest', 'short', 'shorter', 'shortest',
    'significant', 'similar', 'single', 'slight', 'slow', 'slower', 'slowest', 'smooth', 'soft',
    'softer', 'softest', 'solid', 'sorry', 'southern', 'specific', 'strange', 'sudden',
    'successful', 'sweet', 'sweeter', 'sweetest', 'tall', 'taller', 'tallest', 'terrible',
    'thick', 'thicker', 'thickest', 'thin', 'thinner', 'thinnest', 'tight', 'tiny', 'tough',
    'traditional', 'typical', 'unique', 'upper', 'useful', 'usual', 'various', 'warm', 'warmer',
    'warmest', 'weak', 'weaker', 'weakest', 'western', 'wide', 'wider', 'widest', 'wild',
    'wonderful', 'wrong', 'angry', 'basic', 'brief', 'busy', 'busier', 'busiest', 'cheap',
    'cheaper', 'cheapest', 'clean', 'cleaner', 'cleanest', 'complex', 'confused', 'correct',
    'critical', 'cultural', 'dangerous', 'dead', 'decent', 'desperate', 'digital', 'dirty',
    'dirtier', 'dirtiest', 'dramatic', 'dry', 'drier', 'driest', 'educational', 'efficient',
    'electric', 'electronic', 'empty', 'enormous', 'excellent', 'expensive', 'extreme',
    'familiar', 'fantastic', 'fat', 'fatter', 'fattest', 'favorite', 'favourite', 'flat',
    'flatter', 'flattest', 'flexible', 'formal', 'former', 'fortunate', 'frequent', 'friendly',
    'frightened', 'funny', 'funnier', 'funniest', 'gentle', 'genuine', 'grateful', 'guilty',
    'healthy', 'healthier', 'healthiest', 'helpful', 'historical', 'holy', 'honest', 'horrible',
    'hungry', 'hungrier', 'hungriest', 'ill', 'illegal', 'independent', 'inevitable',
    'informal', 'inner', 'innocent', 'intelligent', 'interesting', 'internal', 'joint',
    'junior', 'keen', 'kinder', 'kindest', 'late', 'later', 'latest', 'latter', 'lazy',
    'lazier', 'laziest', 'lonely', 'loose', 'lucky', 'luckier', 'luckiest', 'mad', 'magnetic',
    'male', 'female', 'massive', 'mental', 'mere', 'minimum', 'minor', 'moral', 'naked',
    'nasty', 'native', 'neat', 'necessary', 'nervous', 'nice', 'nicer', 'nicest', 'northern',
    'nuclear', 'numerous', 'odd', 'okay', 'ok', 'online', 'ordinary', 'outer', 'overall',
    'painful', 'pale', 'parallel', 'partial', 'permanent', 'plain', 'plastic', 'pleasant',
    'plenty', 'plus', 'polite', 'poor', 'poorer', 'poorest', 'pregnant', 'pretty', 'prettier',
    'prettiest', 'prime', 'principal', 'prior', 'probable', 'pure', 'purer', 'purest', 'rare',
    'rarer', 'rarest', 'raw', 'reasonable', 'relevant', 'remarkable', 'remote', 'revolutionary',
    'ridiculous', 'romantic', 'royal', 'rural', 'sad', 'sadder', 'saddest', 'scared', 'secure',
    'sensitive', 'severe', 'sexual', 'shallow', 'shocked', 'sick', 'sicker', 'sickest',
    'silent', 'silly', 'silver', 'smart', 'smarter', 'smartest', 'sophisticated', 'sour',
    'spare', 'spiritual', 'stable', 'steady', 'steep', 'still', 'straight', 'strict', 'stupid',
    'substantial', 'sufficient', 'suitable', 'super', 'supreme', 'suspicious', 'technical',
    'temporary', 'tender', 'tired', 'tremendous', 'tropical', 'ugly', 'uglier', 'ugliest',
    'ultimate', 'unable', 'uncomfortable', 'underground', 'unlikely', 'unnecessary', 'unusual',
    'urban', 'urgent', 'valuable', 'visible', 'visual', 'vital', 'wealthy', 'wealthier',
    'wealthiest', 'weekly', 'wet', 'wetter', 'wettest', 'willing', 'wise', 'wiser', 'wisest',
    'wooden', 'worthy',

    # Common adverbs
    'not', 'also', 'very', 'just', 'only', 'now', 'then', 'more', 'here', 'there', 'well',
    'even', 'never', 'really', 'most', 'much', 'already', 'always', 'often', 'however', 'again',
    'too', 'yet', 'ever', 'once', 'together', 'almost', 'enough', 'sometimes', 'probably',
    'actually', 'soon', 'especially', 'certainly', 'clearly', 'finally', 'simply', 'quickly',
    'slowly', 'usually', 'exactly', 'perhaps', 'maybe', 'recently', 'suddenly', 'nearly',
    'easily', 'generally', 'rather', 'quite', 'completely', 'seriously', 'properly',
    'apparently', 'carefully', 'directly', 'equally', 'eventually', 'extremely', 'fairly',
    'frequently', 'gradually', 'hardly', 'heavily', 'highly', 'immediately', 'increasingly',
    'indeed', 'initially', 'largely', 'mainly', 'merely', 'naturally', 'necessarily',
    'normally', 'obviously', 'occasionally', 'originally', 'particularly', 'partly',
    'perfectly', 'personally', 'possibly', 'potentially', 'precisely', 'previously',
    'primarily', 'rapidly', 'regularly', 'relatively', 'significantly', 'similarly', 'slightly',
    'strongly', 'successfully', 'truly', 'typically', 'ultimately', 'unfortunately',
    'absolutely', 'basically', 'constantly', 'deeply', 'definitely', 'effectively', 'entirely',
    'essentially', 'forever', 'fully', 'hopefully', 'literally', 'loudly', 'mostly', 'nearby',
    'officially', 'openly', 'otherwise', 'purely', 'roughly', 'sadly', 'safely', 'sharply',
    'softly', 'somewhere', 'specifically', 'strictly', 'surely', 'totally', 'widely',
    'anywhere', 'everywhere', 'nowhere', 'somehow', 'somewhat', 'anyway', 'besides',
    'meanwhile', 'nevertheless', 'nonetheless', 'therefore', 'thus', 'hence', 'furthermore',
    'moreover', 'accordingly', 'consequently', 'alternatively', 'additionally', 'subsequently',
    'simultaneously', 'predominantly',

    # Prepositions and conjunctions
    'of', 'to', 'in', 'for', 'on', 'with', 'at', 'by', 'from', 'up', 'about', 'into', 'over',
    'after', 'beneath', 'under', 'above', 'and', 'but', 'or', 'as', 'if', 'when', 'than',
    'because', 'while', 'although', 'though', 'whether', 'before', 'since', 'so', 'until',
    'unless', 'through', 'during', 'between', 'against', 'without', 'within', 'along', 'across',
    'behind', 'beyond', 'except', 'around', 'among', 'per', 'off', 'down', 'out', 'near',
    'beside', 'despite', 'toward', 'towards', 'upon', 'via', 'wherever', 'whenever', 'whereas',
    'whereby', 'wherein', 'whereupon',

    # Numbers and ordinals
    'zero', 'two', 'three', 'four', 'five', 'six', 'seven', 'eight', 'nine', 'ten', 'eleven',
    'twelve', 'thirteen', 'fourteen', 'fifteen', 'sixteen', 'seventeen', 'eighteen', 'nineteen',
    'twenty', 'thirty', 'forty', 'fifty', 'sixty', 'seventy', 'eighty', 'ninety', 'hundred',
    'thousand', 'million', 'billion', 'trillion', 'second', 'third', 'fourth', 'fifth', 'sixth',
    'seventh', 'eighth', 'ninth', 'tenth', 'eleventh', 'twelfth', 'thirteenth', 'fourteenth',
    'fifteenth', 'sixteenth', 'seventeenth', 'eighteenth', 'nineteenth', 'twentieth',
    'thirtieth', 'fortieth', 'fiftieth', 'sixtieth', 'seventieth', 'eightieth', 'ninetieth',
    'hundredth', 'twice', 'thrice', 'quarter', 'double', 'triple',

    # Common contractions
    "don't", "doesn't", "didn't", "won't", "wouldn't", "can't", "couldn't", "shouldn't",
    "isn't", "aren't", "wasn't", "weren't", "haven't", "hasn't", "hadn't", "i'm", "you're",
    "he's", "she's", "it's", "we're", "they're", "i've", "you've", "we've", "they've", "i'll",
    "you'll", "he'll", "she'll", "we'll", "they'll", "i'd", "you'd", "he'd", "she'd", "we'd",
    "they'd", "that's", "what's", "who's", "there's", "here's", "let's", "where's", "how's",
    "ain't", 'gonna', 'gotta', 'wanna', 'cannot',

    # Commonly confused words
    'where', 'affect', 'thorough', 'caught', 'achieve', 'weird', 'height', 'neighbour',
    'neighbor', 'favour', 'favor', 'honour', 'honor', 'metre', 'meter', 'theatre', 'theater',
    'recognise', 'apologise', 'apologize', 'criticise', 'criticize', 'emphasise', 'emphasize',
    'analyse', 'analyze', 'paralyse', 'paralyze', 'catalogue', 'catalog', 'dialogue', 'dialog',
    'licence', 'license', 'offence', 'offense', 'cancelled', 'canceled', 'jewellery', 'jewelry',
    'ageing', 'aging',

    # Academic and exam words
    'argument', 'arguments', 'conclusion', 'conclusions', 'definition', 'definitions',
    'description', 'descriptions', 'evaluate', 'evaluates', 'evaluating', 'evaluation',
    'evaluations', 'explanation', 'explanations', 'hypothesis', 'hypotheses', 'illustrate',
    'illustrates', 'illustrating', 'illustration', 'illustrations', 'introduction',
    'introductions', 'justify', 'justifies', 'justifying', 'justification', 'justifications',
    'methodology', 'methodologies', 'outline', 'outlines', 'outlining', 'paragraph',
    'paragraphs', 'perspective', 'perspectives', 'relevance', 'summary', 'summaries',
    'summarize', 'summarise', 'theoretical', 'significance', 'approximately', 'conversely',
    'fundamentally', 'inherently', 'intrinsically', 'extrinsically', 'objectively',
    'subjectively', 'empirically', 'theoretically', 'practically', 'conceptually',
    'hypothetically', 'statistically', 'quantitatively', 'qualitatively', 'systematically',
    'chronologically', 'geographically',

    # Technology and modern terms
    'internet', 'email', 'emails', 'offline', 'software', 'hardware', 'download', 'downloads',
    'uploading', 'upload', 'uploads', 'application', 'applications', 'app', 'apps', 'database',
    'databases', 'password', 'passwords', 'username', 'usernames', 'login', 'logout',
    'smartphone', 'smartphones', 'tablet', 'tablets', 'laptop', 'laptops', 'desktop',
    'desktops', 'keyboard', 'keyboards', 'mouse', 'monitor', 'monitors', 'browser', 'browsers',
    'google', 'googling', 'facebook', 'twitter', 'instagram', 'youtube', 'tiktok', 'snapchat',
    'wifi', 'bluetooth', 'wireless', 'virtual', 'cyber', 'algorithm', 'algorithms',
    'artificial', 'intelligence', 'analytics', 'cloud', 'server', 'servers', 'programming',
    'coding', 'developer', 'developers', 'tech',

    # Common proper nouns (countries, days, months)
    'monday', 'tuesday', 'wednesday', 'thursday', 'friday', 'saturday', 'sunday', 'january',
    'february', 'march', 'april', 'june', 'july', 'august', 'september', 'october', 'november',
    'december', 'america', 'american', 'americans', 'britain', 'british', 'england', 'english',
    'france', 'french', 'germany', 'german', 'spain', 'spanish', 'italy', 'italian', 'china',
    'chinese', 'japan', 'japanese', 'india', 'indian', 'australia', 'australian', 'canada',
    'canadian', 'mexico', 'mexican', 'brazil', 'brazilian', 'russia', 'russian', 'africa',
    'african', 'europe', 'european', 'asia', 'asian', 'americas',

    # Additional common words
    'yeah', 'yes', 'please', 'hello', 'hi', 'bye', 'goodbye', 'afternoon', 'evening',
    'tomorrow', 'everything', 'something', 'nothing', 'anything', 'everyone', 'someone',
    'anyone', 'nobody', 'everybody', 'somebody', 'anybody', 'anyhow', 'whatsoever',

    # Everyday words used in dictated answers
    'like', 'likes', 'liked', 'liking', 'dislike', 'cat', 'cats', 'bird', 'birds', 'fish',
    'fishes', 'fox', 'foxes', 'apple', 'apples', 'sentence', 'sentences', 'document',
    'documents', 'exam', 'exams', 'essay', 'essays', 'dictation', 'dictate', 'edit', 'edits',
    'editing', 'cursor', 'spelling', 'grammar', 'punctuation', 'comma',
})
